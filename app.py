import gradio as gr

from report_sanitizer.config import load_settings
from report_sanitizer.handlers import (
    OPERATIONS,
    PLATFORM_CHOICES,
    export_handler,
    load_report_handler,
    preview_handler,
)
from report_sanitizer.log_utils import setup_logging

settings = load_settings()
logger = setup_logging(settings.log_level)

# --- UI Definition ---
with gr.Blocks(title="Report Sanitizer") as demo:
    gr.Markdown("# Report Sanitizer")
    gr.Markdown("Upload a JSON report, hide absolute paths and flatten its keys into readable labels.")

    # State
    report_data_state = gr.State()

    with gr.Tab("Sanitize Report"):
        with gr.Row():
            # Left Panel: Input & Options
            with gr.Column(scale=1):
                gr.Markdown("### 1. Import")
                file_input = gr.File(label="Upload JSON Report", file_types=[".json"])
                status_msg = gr.Textbox(label="Status", interactive=False)

                gr.Markdown("### 2. Options")
                operations = gr.CheckboxGroup(
                    choices=OPERATIONS,
                    value=OPERATIONS,
                    label="Operations",
                    info="Paths are hidden before keys are flattened.",
                )
                platform_selector = gr.Radio(
                    choices=PLATFORM_CHOICES,
                    value=settings.platform,
                    label="Path Platform",
                )

            # Right Panel: Output
            with gr.Column(scale=1):
                gr.Markdown("### 3. Preview & Export")
                output_filename = gr.Textbox(label="Output Filename (optional)", placeholder="sanitized_report")
                preview_btn = gr.Button("Load Preview")
                export_btn = gr.Button("Export Report", variant="primary", interactive=False)
                download_output = gr.File(label="Download Result")
                report_preview = gr.JSON(label="Preview")

        file_input.upload(
            fn=load_report_handler,
            inputs=[file_input],
            outputs=[report_data_state, export_btn, status_msg],
        )

        preview_btn.click(
            fn=preview_handler,
            inputs=[report_data_state, operations, platform_selector],
            outputs=[report_preview, status_msg],
        )

        export_btn.click(
            fn=export_handler,
            inputs=[report_data_state, operations, platform_selector, output_filename],
            outputs=[download_output, status_msg],
        )

if __name__ == "__main__":
    logger.info("Starting Report Sanitizer on %s:%s", settings.host, settings.port)
    demo.launch(server_name=settings.host, server_port=settings.port)
