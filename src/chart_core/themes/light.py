"""Light theme."""

from chart_core.render.style import Theme

LIGHT_THEME = Theme(
    name="light",
    background_color="none",
    grid_color="rgba(0, 0, 0, 0.1)",
    axis_color="#666666",
    tick_label_color="#333333",
    tick_font_size=11.0,
    label_font_family="'Helvetica Neue', Helvetica, Arial, sans-serif",
    title_color="#111111",
    title_font_size=18.0,
    legend_background="rgba(255, 255, 255, 0.8)",
    legend_text_color="#333333",
    legend_font_size=12.0,
    series_colors=[
        "#1f77b4",
        "#ff7f0e",
        "#2ca02c",
        "#d62728",
        "#9467bd",
        "#8c564b",
    ],
    line_width=2.0,
    area_opacity=0.2,
    scrubber_line_color="#999999",
    beacon_stroke="#ffffff",
    label_text_color="#ffffff",
)
