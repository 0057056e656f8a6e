WHITE = (255, 255, 255)
BLACK = (0, 0, 0)

GAINSBORO = (220, 220, 220)
LIGHT_GREY = (180, 180, 180)
MID_GREY = (120, 120, 120)
GREY = (100, 100, 100)
DARK_GREY = (70, 70, 70)
CHARCOAL = (45, 45, 45)

STEEL_BLUE = (70, 130, 180)
