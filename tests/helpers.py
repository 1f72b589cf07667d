"""Page builders shared by the test modules."""


def audio_page(*pairs):
    """Build a dictionary page with one audio button per (origin, src) pair."""
    buttons = "\n".join(
        f'<button data-audioorigin="{origin}" data-audiosrc="{src}">play</button>'
        for origin, src in pairs
    )
    return f"<html><body><section>{buttons}</section></body></html>"
