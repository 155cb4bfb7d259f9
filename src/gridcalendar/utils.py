POINTS_PER_INCH = 72.0
TEX_POINTS_PER_INCH = 72.27
SCALED_POINTS_PER_POINT = 65536

def pt2in(pt: float) -> float:
    """Convert PostScript (big) points to inches."""
    return pt / POINTS_PER_INCH

def in2pt(inches: float) -> float:
    """Convert inches to PostScript (big) points."""
    return inches * POINTS_PER_INCH

def sp2in(sp: float) -> float:
    """Convert TeX scaled points to inches (1pt = 65536sp, 72.27pt = 1in)."""
    return sp / SCALED_POINTS_PER_POINT / TEX_POINTS_PER_INCH
