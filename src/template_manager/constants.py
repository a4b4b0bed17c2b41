"""Centralized constants for template-manager."""
#Owner used for rows that predate ownership tagging
DEFAULT_OWNER="sameer"
#Category for root-level files that belong to no group
FALLBACK_CATEGORY="other"
#Tag injected by the editor live preview server
LIVE_PREVIEW_SCRIPT_PATTERN=r'<script type="text/javascript" src="/___vscode_livepreview_injected_script"></script>\s*'
#Copy button feedback
COPY_FEEDBACK_SECONDS=2.0
#HTTP timeouts in seconds
class Timeouts:
    CONTENT_FETCH=30.0
