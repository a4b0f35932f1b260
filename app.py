#!/usr/bin/env python3
"""
Voxel Camera Web Interface

A simple Gradio-based form for computing Blender render settings for
isometric voxel sprites.

Run with: python app.py
Then open http://localhost:7860 in your browser
"""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent / "src"))

import gradio as gr
from voxel_camera import Dimensions, compute_settings
from voxel_camera.cli import coerce_int, DEFAULT_DECIMALS, DEFAULT_TILE_SIZE
from voxel_camera.preview import render_preview


def update_settings(tile_size: str, x_tiles: str, y_tiles: str, z_tiles: str):
    """
    Recompute settings from the form fields.

    Returns width, height, scale text and the preview image.
    """
    dimensions = Dimensions(
        tile_size=coerce_int(tile_size),
        x_tiles=coerce_int(x_tiles),
        y_tiles=coerce_int(y_tiles),
        z_tiles=coerce_int(z_tiles)
    )
    settings = compute_settings(dimensions)

    try:
        preview = render_preview(dimensions)
    except ValueError:
        preview = None

    return (
        str(settings.width),
        str(settings.height),
        f"{settings.scale:.{DEFAULT_DECIMALS}f}",
        preview
    )


# Build the Gradio interface
with gr.Blocks(title="Voxel Camera") as app:

    gr.Markdown("""
    # Voxel Camera
    ### Blender settings for pixel-perfect isometric sprites

    Rotate the orthographic camera **X 60°, Y 0°, Z 45°**, then copy the values below.
    """)

    with gr.Row():
        # Left column - Input
        with gr.Column(scale=1):
            gr.Markdown("### Dimensions")

            tile_size = gr.Textbox(value=str(DEFAULT_TILE_SIZE), label="Tile Size (px)")
            x_tiles = gr.Textbox(value="1", label="X Size (tiles)")
            y_tiles = gr.Textbox(value="1", label="Y Size (tiles)")
            z_tiles = gr.Textbox(value="1", label="Z Size (tiles)")

        # Middle column - Settings
        with gr.Column(scale=1):
            gr.Markdown("### Blender Settings")

            width_output = gr.Textbox(label="Resolution X", interactive=False)
            height_output = gr.Textbox(label="Resolution Y", interactive=False)
            scale_output = gr.Textbox(label="Orthographic Scale", interactive=False)

        # Right column - Preview
        with gr.Column(scale=1):
            gr.Markdown("### Frame Preview")

            preview_output = gr.Image(label="Silhouette", type="pil", image_mode="RGBA")

    inputs = [tile_size, x_tiles, y_tiles, z_tiles]
    outputs = [width_output, height_output, scale_output, preview_output]

    # Recompute on every edit
    for field in inputs:
        field.change(fn=update_settings, inputs=inputs, outputs=outputs)

    app.load(fn=update_settings, inputs=inputs, outputs=outputs)


if __name__ == "__main__":
    print("\n" + "="*60)
    print("Voxel Camera Web Interface")
    print("="*60)
    print("\nStarting server...")
    print("Open http://localhost:7860 in your browser\n")

    app.launch(
        server_name="0.0.0.0",
        server_port=7860,
        share=False
    )
