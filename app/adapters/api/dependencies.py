# app/adapters/api/dependencies.py
from app.shared.config import settings

# Use Cases
from app.core.use_cases.render_message import RenderMessage

# --- Singletons ---
# The use case holds no per-request state, so one instance serves every request.
_render_message_instance = RenderMessage(settings)

def get_render_message_use_case() -> RenderMessage:
    return _render_message_instance
