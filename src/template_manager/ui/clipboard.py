"""System clipboard access through the platform's clipboard command."""
from __future__ import annotations
import shutil
import subprocess
import sys
from template_manager.exceptions import ClipboardError
_LINUX_COMMANDS=(["wl-copy"],["xclip","-selection","clipboard"],["xsel","--clipboard","--input"])
def clipboard_command()->list[str]|None:
    """Return the command that writes stdin to the clipboard, or None."""
    if sys.platform=="darwin":
        return["pbcopy"]
    elif sys.platform=="win32":
        return["clip"]
    for cmd in _LINUX_COMMANDS:
        if shutil.which(cmd[0]):return list(cmd)
    return None
def copy_to_clipboard(text:str)->None:
    """Write text to the system clipboard.
    Raises:
        ClipboardError: If no clipboard command exists or it fails.
    """
    cmd=clipboard_command()
    if cmd is None:raise ClipboardError("Failed to copy to clipboard",details="no clipboard command found (install wl-clipboard, xclip or xsel)")
    try:
        subprocess.run(cmd,input=text.encode("utf-8"),check=True,capture_output=True)
    except(OSError,subprocess.CalledProcessError)as e:
        raise ClipboardError("Failed to copy to clipboard",details=str(e))from e
