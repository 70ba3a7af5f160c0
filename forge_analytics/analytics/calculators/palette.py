"""Dashboard colour palette shared by the chart calculators."""

CYAN = "#00ffff"
VIOLET = "#8b5cf6"
PINK = "#ec4899"
AMBER = "#f59e0b"
WHITE = "#ffffff"

CYAN_FILL = "rgba(0, 255, 255, 0.1)"
CYAN_AREA = "rgba(0, 255, 255, 0.2)"
VIOLET_FILL = "rgba(139, 92, 246, 0.1)"
VIOLET_BAR = "rgba(139, 92, 246, 0.7)"
PINK_FILL = "rgba(236, 72, 153, 0.1)"
TRACK = "rgba(255, 255, 255, 0.1)"  # Unfilled doughnut slice

POLAR_SLICES = [
    "rgba(0, 255, 255, 0.7)",
    "rgba(139, 92, 246, 0.7)",
    "rgba(236, 72, 153, 0.7)",
    "rgba(245, 158, 11, 0.7)",
]

LINE_TENSION = 0.4
ANIMATION_MS = 2000
