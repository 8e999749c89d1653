"""Dark grey theme."""

from chart_core.render.style import Theme

DARK_THEME = Theme(
    name="dark",
    background_color="#2b2b2b",
    grid_color="rgba(255, 255, 255, 0.12)",
    axis_color="#888888",
    tick_label_color="#cccccc",
    tick_font_size=11.0,
    label_font_family="'Helvetica Neue', Helvetica, Arial, sans-serif",
    title_color="#ffffff",
    title_font_size=18.0,
    legend_background="rgba(0, 0, 0, 0.3)",
    legend_text_color="#e0e0e0",
    legend_font_size=12.0,
    series_colors=[
        "#24b064",
        "#4a90d9",
        "#f5a623",
        "#e63946",
        "#9b59b6",
        "#1abc9c",
    ],
    line_width=2.0,
    area_opacity=0.3,
    scrubber_line_color="#aaaaaa",
    beacon_stroke="#2b2b2b",
    label_text_color="#ffffff",
)
