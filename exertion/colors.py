# Type alias for RGB colors
Color = tuple[int, int, int]

# Basic colors
WHITE: Color = (255, 255, 255)
RED: Color = (255, 0, 0)
ORANGE: Color = (255, 165, 0)

# Message colors
STAMINA_WARNING: Color = ORANGE
STRAIN_PAIN: Color = RED
