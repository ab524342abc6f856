from .tailor_client import (
    TailorClient,
    build_tailor_request,
    copy_tailored_resume,
    system_clipboard,
)
from .config import WebConfig, get_config
from .render import render_page, render_text

__all__ = [
    "TailorClient",
    "build_tailor_request",
    "copy_tailored_resume",
    "system_clipboard",
    "WebConfig",
    "get_config",
    "render_page",
    "render_text",
]
