"""
Drawing backends. Each one consumes the primitive stream produced by
`gridcalendar.render.render_grid`; none of them makes layout decisions.
"""
