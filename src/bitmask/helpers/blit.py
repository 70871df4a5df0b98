"""Parameter clamping shared by blit operations."""


def normalize_params(dest, source, dx, dy, sx, sy, sw, sh):
    """Clamp a blit so both the read and the write stay inside their masks.

    ``dest`` and ``source`` only need ``width`` and ``height``.  Offsets move
    together so the relative displacement between source and destination is
    preserved.  The returned extents may be zero or negative; callers treat
    that as an empty copy.

    Returns ``(dx, dy, sx, sy, sw, sh)``.
    """
    dst_w, dst_h = dest.width, dest.height
    src_w, src_h = source.width, source.height

    # negative destination offsets eat into the copied extent
    if dx < 0:
        sw += dx
        sx -= dx
        dx = 0
    if dy < 0:
        sh += dy
        sy -= dy
        dy = 0

    # same for negative source offsets
    if sx < 0:
        sw += sx
        dx -= sx
        sx = 0
    if sy < 0:
        sh += sy
        dy -= sy
        sy = 0

    if dx + sw > dst_w:
        sw = dst_w - dx
    if dy + sh > dst_h:
        sh = dst_h - dy
    if sx + sw > src_w:
        sw = src_w - sx
    if sy + sh > src_h:
        sh = src_h - sy

    return dx, dy, sx, sy, sw, sh
