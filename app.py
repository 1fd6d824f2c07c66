import logging

import gradio as gr

from table_tree_converter.config import settings
from table_tree_converter.handlers import (
    export_data_handler,
    handle_file_upload,
    handle_paste,
    handle_policy_change,
)

logging.basicConfig(level=getattr(logging, settings.logging.level.upper(), logging.INFO))

POLICY_CHOICES = [
    ("Blank cell -> null", "null"),
    ('Blank cell -> empty string ("")', "empty"),
    ("Blank cell -> omit the key", "omit"),
]

# --- UI Definition ---
with gr.Blocks(title=settings.ui.title) as demo:
    gr.Markdown(f"# {settings.ui.title}")
    gr.Markdown(
        "Paste cells copied from a spreadsheet (header row first). "
        "Headers like `address.city` nest objects, `hobby[]` collects values into an array, "
        "and `family[]name` builds an array of objects. Rows sharing the same plain-header values are merged."
    )

    # State
    table_state = gr.State(value=[])

    with gr.Row():
        # Left Panel: Input
        with gr.Column(scale=1):
            gr.Markdown("### 1. Paste or upload")
            paste_box = gr.Textbox(
                label="Spreadsheet data",
                placeholder="Paste here (Ctrl+V / Cmd+V)",
                lines=6,
            )
            file_input = gr.File(label="Or upload a .tsv / .txt file", file_types=[".tsv", ".txt"])

            gr.Markdown("### 2. Blank cells")
            policy_radio = gr.Radio(
                choices=POLICY_CHOICES,
                value=settings.conversion.empty_value_policy.value,
                label="Empty value handling",
            )
            status_msg = gr.Textbox(label="Status", interactive=False)

            gr.Markdown("### 3. Table")
            table_view = gr.Dataframe(label="Table data", interactive=False, wrap=True)
            header_tree = gr.JSON(label="Header structure")

        # Right Panel: Output
        with gr.Column(scale=1):
            gr.Markdown("### 4. Tree JSON")
            tree_json = gr.JSON(label="Tree JSON")

            gr.Markdown("### 5. Export")
            output_format = gr.Radio(choices=["JSON", "TSV"], value="JSON", label="Output Format")
            output_filename = gr.Textbox(label="Output Filename (optional)", placeholder=settings.export.default_filename)
            export_btn = gr.Button("Export Data", variant="primary")
            download_output = gr.File(label="Download Result")

    paste_box.change(
        fn=handle_paste,
        inputs=[paste_box, policy_radio],
        outputs=[table_state, table_view, tree_json, header_tree, status_msg],
    )

    file_input.upload(
        fn=handle_file_upload,
        inputs=[file_input, policy_radio],
        outputs=[table_state, table_view, tree_json, header_tree, status_msg],
    )

    policy_radio.change(
        fn=handle_policy_change,
        inputs=[table_state, policy_radio],
        outputs=[tree_json, status_msg],
    )

    export_btn.click(
        fn=export_data_handler,
        inputs=[table_state, policy_radio, output_format, output_filename],
        outputs=[download_output, status_msg],
    )

if __name__ == "__main__":
    demo.launch()
