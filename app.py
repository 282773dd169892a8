import gradio as gr

from json_flattener.handlers import (
    export_flattened_handler,
    flatten_text_handler,
    load_and_flatten,
)

# --- UI Definition ---
with gr.Blocks(title="JSON Flattener") as demo:
    gr.Markdown("# JSON Flattener")
    gr.Markdown("Upload or paste a JSON object. Nested keys are joined with the separator and colliding values are collected into arrays.")

    # State
    flat_state = gr.State()

    with gr.Row():
        # Left Panel: Input
        with gr.Column(scale=1):
            gr.Markdown("### 1. Import")
            file_input = gr.File(label="Upload JSON File", file_types=[".json"])
            text_input = gr.Code(label="...or paste JSON", language="json")
            separator = gr.Textbox(label="Key Separator", value=".", max_lines=1)
            flatten_btn = gr.Button("Flatten Pasted JSON")
            status_msg = gr.Textbox(label="Status", interactive=False)
            original_view = gr.JSON(label="Original")

        # Right Panel: Result
        with gr.Column(scale=1):
            gr.Markdown("### 2. Flattened")
            flat_view = gr.JSON(label="Flattened")

            gr.Markdown("### 3. Export")
            output_format = gr.Radio(choices=["JSON", "CSV"], value="JSON", label="Output Format")
            output_filename = gr.Textbox(label="Output Filename (optional)", placeholder="flattened")
            export_btn = gr.Button("Export Data", variant="primary", interactive=False)
            download_output = gr.File(label="Download Result")

    def _show(original, flat, message, export_update):
        return original, flat, flat, message, export_update

    file_input.upload(
        fn=lambda f, sep: _show(*load_and_flatten(f, sep)),
        inputs=[file_input, separator],
        outputs=[original_view, flat_view, flat_state, status_msg, export_btn],
    )

    flatten_btn.click(
        fn=lambda text, sep: _show(*flatten_text_handler(text, sep)),
        inputs=[text_input, separator],
        outputs=[original_view, flat_view, flat_state, status_msg, export_btn],
    )

    export_btn.click(
        fn=export_flattened_handler,
        inputs=[flat_state, output_format, output_filename],
        outputs=[download_output, status_msg],
    )

if __name__ == "__main__":
    demo.launch()
