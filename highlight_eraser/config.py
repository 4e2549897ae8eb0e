# highlight_eraser/config.py

ERASER_KEY = "Eraser"

# Sampling rate (Hz) for continuous gestures (pan, hold_pan)
DEFAULT_HOLD_PAN_RATE = 30.0
LOW_HOLD_PAN_RATE = 5.0

FULL_SCREEN = {
    "ratio_x": 0,
    "ratio_y": 0,
    "ratio_w": 1,
    "ratio_h": 1,
}

# Wildcard override: precede every zone that does not carry it itself.
OVERRIDE_ALL = "*"

# Reader zones the eraser pre-empts while active
ZONE_OVERRIDES = (
    # page navigation (paged & rolling)
    "paging_swipe", "paging_pan", "paging_pan_release",
    "rolling_swipe", "rolling_pan", "rolling_pan_release",
    "tap_forward", "tap_backward",

    # highlight creation
    "readerhighlight_tap", "readerhighlight_hold", "readerhighlight_swipe",

    # top menu, edge swipes included
    "readermenu_tap", "readermenu_ext_tap",
    "readermenu_swipe", "readermenu_ext_swipe",
    "readermenu_pan", "readermenu_ext_pan",
    "tap_top_left_corner", "tap_top_right_corner",

    # bottom config menu
    "readerconfigmenu_tap", "readerconfigmenu_ext_tap",
    "readerconfigmenu_swipe", "readerconfigmenu_ext_swipe",
    "readerconfigmenu_pan", "readerconfigmenu_ext_pan",

    "readerfooter_tap", "readerfooter_hold",
    "config_grip",
    "twocol_swipe", "twocol_pan",

    OVERRIDE_ALL,
)

FOOTER_INDICATOR = {
    "icons":         "✏ ",
    "compact_items": "✏",
}
FOOTER_INDICATOR_TEXT = "E"
