BACKSPACE = "Backspace"

# DOM-style key names that never reach the paragraph
UNSUPPORTED_KEYS = frozenset({
    "Shift", "Control", "Alt", "AltGraph", "Meta", "OS", "Fn", "Hyper", "Super",
    "CapsLock", "NumLock", "ScrollLock", "Tab", "Escape", "Enter",
    "ArrowUp", "ArrowDown", "ArrowLeft", "ArrowRight",
    "Home", "End", "PageUp", "PageDown", "Insert", "Delete",
    "ContextMenu", "PrintScreen", "Pause", "Dead", "Process", "Unidentified",
    "F1", "F2", "F3", "F4", "F5", "F6", "F7", "F8", "F9", "F10", "F11", "F12",
})


def is_supported_key(key: str) -> bool:
    return bool(key) and key not in UNSUPPORTED_KEYS
