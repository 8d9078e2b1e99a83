"""NiceGUI chat page for Aiko."""

from nicegui import events, ui

from aiko.attachments.images import NOT_AN_IMAGE
from aiko.completion.client import get_completion_client
from aiko.conversation.controller import ChatController
from aiko.conversation.store import ConversationStore
from aiko.models.conversation import Message, Role

CUSTOM_CSS = """
<style>
    body { background: #f9fafb; min-height: 100vh; }

    .app-container {
        background: white;
        border-radius: 16px;
        box-shadow: 0 20px 40px rgba(0, 0, 0, 0.15);
        overflow: hidden;
    }

    .message-user {
        background: #ec4899;
        color: white;
        border-radius: 18px 18px 4px 18px;
    }

    .message-assistant {
        background: #f3f4f6;
        color: #1f2937;
        border-radius: 18px 18px 18px 4px;
    }

    .summary-note {
        background: #fef9c3;
        border-left: 4px solid #facc15;
        color: #854d0e;
        border-radius: 0 8px 8px 0;
    }

    .avatar-user { background: #f9a8d4; }
    .avatar-assistant { background: #a855f7; }

    .typing-dot {
        width: 8px; height: 8px;
        background: #d8b4fe;
        border-radius: 50%;
        animation: bounce 1.4s infinite ease-in-out;
    }
    .typing-dot:nth-child(2) { animation-delay: 0.15s; }
    .typing-dot:nth-child(3) { animation-delay: 0.3s; }

    @keyframes bounce {
        0%, 60%, 100% { transform: translateY(0); }
        30% { transform: translateY(-6px); }
    }

    .suggestion-chip { border: 1px solid #d8b4fe !important; }

    .send-btn { background: #ec4899 !important; }
</style>
"""


@ui.page("/")
def chat_page() -> None:
    """Main chat page. Every visit starts a fresh conversation."""
    ui.add_head_html(CUSTOM_CSS)
    store = ConversationStore()
    controller = ChatController(store, get_completion_client())

    scroll_area: ui.scroll_area
    input_field: ui.input
    send_btn: ui.button
    attach_btn: ui.button
    summarize_btn: ui.button
    uploader: ui.upload

    def render_avatar(is_user: bool) -> None:
        css = "avatar-user" if is_user else "avatar-assistant"
        label = "You" if is_user else "A"
        avatar_classes = f"w-10 h-10 rounded-full flex items-center justify-center shrink-0 {css}"
        with ui.element("div").classes(avatar_classes):
            ui.label(label).classes("text-white font-bold text-sm")

    def render_summary(msg: Message) -> None:
        with ui.column().classes("w-full summary-note p-3 gap-1"):
            ui.label("Conversation Summary").classes("font-bold text-sm")
            ui.label(msg.text or "").classes("text-sm italic")

    def render_message(msg: Message) -> None:
        if msg.role is Role.SUMMARY:
            render_summary(msg)
            return

        is_user = msg.role is Role.USER
        align = "justify-end" if is_user else "justify-start"
        bubble = "message-user" if is_user else "message-assistant"

        with ui.row().classes(f"w-full {align} gap-3 items-end no-wrap"):
            if not is_user:
                render_avatar(False)
            with ui.column().classes("max-w-[70%] gap-1"):
                with ui.column().classes(f"px-4 py-3 gap-2 {bubble}"):
                    if msg.image:
                        ui.image(msg.image).classes("rounded-lg max-h-60 w-60").props(
                            "fit=contain"
                        )
                    if msg.text:
                        # Replies come back as Markdown; user text is shown verbatim
                        if is_user:
                            ui.label(msg.text).classes("text-sm whitespace-pre-wrap")
                        else:
                            ui.markdown(msg.text).classes("text-sm leading-relaxed")
                ui.label(msg.time).classes(
                    f"text-[10px] text-gray-400 {'self-end' if is_user else 'self-start'}"
                )
            if is_user:
                render_avatar(True)

    def render_typing_indicator() -> None:
        with ui.row().classes("w-full justify-start gap-3 items-end"):
            render_avatar(False)
            with ui.element("div").classes("message-assistant px-4 py-3"):
                with ui.row().classes("gap-1"):
                    for _ in range(3):
                        ui.element("div").classes("typing-dot")

    async def send_suggestion(reply: str) -> None:
        await controller.send_message(reply)

    def render_suggestions() -> None:
        with ui.row().classes("gap-2 ml-12 flex-wrap"):
            for reply in store.suggestions:
                ui.button(
                    reply, on_click=lambda r=reply: send_suggestion(r)
                ).props("flat rounded no-caps dense color=purple").classes(
                    "suggestion-chip px-3 text-sm"
                )

    @ui.refreshable
    def messages_view() -> None:
        for msg in store.messages:
            render_message(msg)
        if store.is_busy:
            render_typing_indicator()
        elif store.suggestions:
            render_suggestions()

    @ui.refreshable
    def composer_status() -> None:
        if store.last_error:
            ui.label(store.last_error).classes("w-full text-red-500 text-sm text-center")
        if store.pending_image:
            with ui.element("div").classes("relative p-2 border rounded-lg bg-gray-100"):
                ui.image(store.pending_image).classes("h-24 w-24 rounded-md").props(
                    "fit=contain"
                )
                ui.button(icon="close", on_click=controller.clear_image).props(
                    "round dense size=xs color=red"
                ).classes("absolute top-1 right-1")

    def sync_controls() -> None:
        busy = store.is_busy
        for control in (input_field, send_btn, attach_btn):
            control.set_enabled(not busy)
        summarize_btn.set_enabled(not busy and store.can_summarize)
        placeholder = "Add a caption..." if store.pending_image else "Talk to Aiko..."
        input_field.props(f'placeholder="{placeholder}"')

    def on_state_change() -> None:
        messages_view.refresh()
        composer_status.refresh()
        sync_controls()
        scroll_area.scroll_to(percent=1.0)

    async def send() -> None:
        if store.is_busy:
            return
        text = input_field.value or ""
        input_field.value = ""
        await controller.send_message(text)

    async def handle_upload(e: events.UploadEventArguments) -> None:
        content = await e.file.read()
        controller.attach_image(content, e.file.content_type, e.file.name)
        uploader.reset()

    def handle_rejected() -> None:
        store.set_error(NOT_AN_IMAGE)

    # === UI Layout ===
    with (
        ui.element("div").classes("w-full min-h-screen p-4 md:p-8"),
        ui.column().classes("w-full max-w-2xl mx-auto app-container gap-0").style(
            "height: 90vh"
        ),
    ):
        # Header
        with ui.row().classes("w-full px-5 py-4 items-center justify-between border-b"):
            ui.label("Aiko AI Chatbot 💋").classes("text-xl md:text-2xl font-bold text-gray-800")
            summarize_btn = ui.button("Summarize ✨", on_click=controller.summarize).props(
                "flat no-caps color=purple"
            ).classes("bg-purple-100 text-sm")

        # Messages
        with ui.scroll_area().classes("flex-grow w-full") as scroll_area:
            with ui.column().classes("w-full p-6 gap-4"):
                messages_view()

        # Input
        with ui.column().classes("w-full p-4 gap-2 border-t"):
            composer_status()
            with ui.row().classes("w-full items-center gap-2 no-wrap"):
                uploader = ui.upload(
                    on_upload=handle_upload,
                    on_rejected=handle_rejected,
                    auto_upload=True,
                    max_files=1,
                ).props("accept=image/*").classes("hidden")
                attach_btn = ui.button(
                    icon="attach_file", on_click=lambda: uploader.run_method("pickFiles")
                ).props("flat round color=grey-8")
                input_field = (
                    ui.input(placeholder="Talk to Aiko...")
                    .props("outlined dense")
                    .classes("flex-grow")
                    .on("keydown.enter", send)
                )
                send_btn = ui.button("Send", on_click=send).props(
                    "unelevated no-caps color=pink"
                ).classes("send-btn px-6")

    store.subscribe(on_state_change)
    sync_controls()
