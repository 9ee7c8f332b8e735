"""
Platform layers: termios on Unix, kernel32 on Windows.

Only ``wincon`` is safe to import everywhere; ``unix`` and ``windows``
are imported by whoever needs them, on the platform they belong to.
"""
