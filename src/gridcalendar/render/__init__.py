from gridcalendar.render.renderer import ContentFn, render_grid

__all__ = ["ContentFn", "render_grid"]
