# House outline, in scene units before the (X_OFFSET, Y_OFFSET) shift.
# Each layer is (fill colour, polygons); layers are painted in the order listed.

# Walls
LIGHT_WALL = '#CECABE'
DARK_WALL = '#757170'
WALL_SHADOW = '#564F47'

WALLS = (
    (LIGHT_WALL, (
        ((235, 101), (176, 97), (176, 110), (235, 113)),
        ((189, 123), (210, 124), (210, 142), (189, 142)),
        ((189, 120), (189, 144), (141, 144), (141, 119)),
        ((247, 145), (247, 121), (233, 106), (218, 120), (218, 145)),
    )),
    (DARK_WALL, (
        ((218, 124), (210, 124), (210, 142), (218, 144)),
        ((141, 119), (113, 74), (104, 94), (103, 139), (141, 144)),
        ((35, 143), (35, 117), (25, 86), (16, 118), (17, 141)),
        ((151, 94), (151, 108), (141, 94)),
    )),
    (LIGHT_WALL, (
        ((35, 117), (116, 119), (116, 142), (35, 143)),
        ((151, 108), (173, 109), (173, 95), (162, 85), (151, 94)),
    )),
    (WALL_SHADOW, (
        ((35, 118), (119, 121), (118, 118), (35, 116)),
        ((140, 120), (189, 121), (189, 118), (140, 118)),
        ((176, 99), (235, 102), (235, 99), (176, 97)),
        ((232, 107), (246, 121), (250, 121), (234, 105)),
    )),
)

# Door
DOOR = (
    ('#72634E', (
        ((210, 123), (210, 142), (203, 142), (203, 123)),
    )),
)

# Windows: corners listed clockwise from the top left
SHUTTER_COLOUR = '#4A4944'
SHUTTER_WIDTH = 4

WINDOWS = (
    ((223, 126), (242, 126), (242, 140), (223, 140)),
    ((154, 96), (169, 96), (169, 107), (154, 107)),
    ((187, 99), (206, 99), (206, 110), (187, 110)),
    ((149, 123), (164, 123), (164, 140), (149, 140)),
    ((168, 123), (181, 123), (181, 140), (168, 140)),
    ((190, 122), (202, 122), (202, 135), (190, 135)),
    ((57, 122), (71, 122), (71, 138), (57, 138)),
    ((86, 122), (100, 122), (100, 138), (86, 138)),
)

# Glass gradient stops
DAY_GLASS = ((0.0, 'grey'), (0.5, 'white'), (1.0, 'grey'))
LIT_GLASS = ((0.0, 'white'), (1.0, 'yellow'))
DARK_GLASS = ((0.0, 'grey'), (1.0, 'black'))

# Roof
ROOF = (
    ('#655B51', (
        ((153, 70), (217, 74), (241, 98), (175, 95)),
        ((223, 104), (234, 104), (217, 120), (189, 120), (189, 111), (216, 111)),
        ((110, 71), (153, 74), (163, 83), (150, 94), (142, 95), (151, 108),
         (173, 108), (173, 98), (176, 98), (176, 101), (182, 101), (195, 118), (139, 118)),
        ((23, 80), (104, 85), (102, 90), (113, 106), (114, 117), (32, 115)),
    )),
    ('#221E1D', (
        ((152, 73), (153, 70), (176, 96), (176, 100), (173, 100), (173, 95), (162, 84)),
        ((110, 71), (113, 75), (105, 94), (100, 94)),
        ((23, 79), (25, 86), (17, 117), (13, 117)),
        ((138, 95), (151, 108), (142, 95)),
    )),
    ('#564F47', (
        ((163, 81), (150, 82), (138, 95), (149, 94)),
        ((162, 83), (175, 96), (173, 96), (161, 84)),
        ((233, 104), (223, 104), (216, 111), (217, 120)),
    )),
)

ROOF_TRIM = (
    ('#DDD', (
        ((33, 115), (116, 116), (116, 120), (33, 117)),
        ((175, 95), (241, 98), (241, 101), (175, 98)),
        ((163, 81), (177, 94), (177, 96), (175, 96), (163, 84), (150, 95), (149, 93)),
        ((189, 121), (218, 121), (218, 124), (189, 124)),
        ((139, 116), (194, 117), (194, 119), (139, 118)),
        ((234, 104), (251, 120), (251, 122), (234, 106), (219, 121), (217, 119)),
    )),
)

# Chimney, painted over the smoke
CHIMNEY = (
    ('#9C714E', (
        ((119, 59), (118, 120), (119, 122), (119, 142), (124, 142), (124, 122),
         (123, 120), (123, 93), (120, 88), (120, 83), (124, 83), (124, 61)),
    )),
    ('#684A37', (
        ((119, 142), (119, 122), (118, 120), (119, 59), (114, 61), (114, 120),
         (113, 122), (113, 142)),
    )),
    ('#5E4433', (
        ((124, 142), (124, 122), (123, 120), (123, 93), (120, 88), (120, 120),
         (121, 122), (121, 142)),
    )),
)

FOLIAGE = (
    ('#5C5636', (
        ((37, 143), (41, 138), (43, 143), (47, 139), (50, 140), (53, 140), (54, 143)),
        ((78, 143), (76, 140), (81, 141), (82, 143)),
    )),
    ('#342812', (
        ((61, 143), (62, 140), (66, 140), (68, 143)),
        ((86, 143), (89, 138), (93, 139), (96, 139), (101, 143)),
        ((34, 143), (33, 139), (31, 143)),
        ((158, 145), (162, 142), (163, 143), (165, 141), (169, 142), (173, 141), (176, 144)),
        ((223, 145), (225, 142), (228, 141), (232, 143), (234, 144), (238, 142),
         (245, 145), (240, 145), (228, 145)),
    )),
    ('#624233', (
        ((103, 143), (99, 141), (96, 137), (101, 137), (102, 135), (106, 136),
         (108, 137), (110, 138), (112, 137), (115, 136), (116, 139), (119, 137),
         (124, 140), (121, 141), (119, 144), (113, 144), (110, 143), (106, 144)),
    )),
)

# Background
SKY_TOP = '#3861A1'
SKY_BOTTOM = '#BBD6EC'
GROUND_COLOUR = '#616540'
GROUND_LEVEL = 220
