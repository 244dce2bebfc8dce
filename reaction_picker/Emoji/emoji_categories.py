# emoji_categories.py
# Description: Fixed category table for the standard emoji catalog
#
# Imports
from typing import Dict, Tuple
#
# Local Imports
from .emoji_models import EmojiCategory, TabRole
#
#######################################################################################################################
#
# Constants:

FREQUENTLY_USED = "frequently_used"
CUSTOM = "custom"

FREQUENTLY_USED_CATEGORY = EmojiCategory(FREQUENTLY_USED, "Frequently Used", "🕒", TabRole.FREQUENT)
CUSTOM_CATEGORY = EmojiCategory(CUSTOM, "Custom", "🚀", TabRole.CUSTOM)

STANDARD_CATEGORIES: Tuple[EmojiCategory, ...] = (
    EmojiCategory("people", "Smileys & People", "😃"),
    EmojiCategory("nature", "Animals & Nature", "🐶"),
    EmojiCategory("food", "Food & Drink", "🍔"),
    EmojiCategory("activity", "Activities", "⚽"),
    EmojiCategory("travel", "Travel & Places", "🚌"),
    EmojiCategory("objects", "Objects", "💡"),
    EmojiCategory("symbols", "Symbols", "💛"),
    EmojiCategory("flags", "Flags", "🏁"),
)

# Short codes per standard category, in display order.
EMOJIS_BY_CATEGORY: Dict[str, Tuple[str, ...]] = {
    "people": (
        "grinning", "smiley", "smile", "grin", "laughing", "sweat_smile", "joy",
        "relaxed", "blush", "innocent", "slightly_smiling_face", "upside_down_face",
        "wink", "relieved", "heart_eyes", "kissing_heart", "kissing", "kissing_smiling_eyes",
        "kissing_closed_eyes", "yum", "stuck_out_tongue_winking_eye",
        "stuck_out_tongue_closed_eyes", "stuck_out_tongue", "money_mouth_face", "hugs",
        "nerd_face", "sunglasses", "smirk", "unamused", "disappointed", "pensive",
        "worried", "confused", "slightly_frowning_face", "persevere", "confounded",
        "tired_face", "weary", "triumph", "angry", "rage", "no_mouth", "neutral_face",
        "expressionless", "hushed", "frowning", "anguished", "open_mouth", "astonished",
        "dizzy_face", "flushed", "scream", "fearful", "cold_sweat", "cry",
        "disappointed_relieved", "sob", "sleepy", "sweat", "sleeping", "mask",
        "thinking_face", "rolling_eyes", "zipper_mouth_face", "lying_face", "grimacing",
        "smiling_imp", "imp", "skull", "ghost", "alien", "robot", "poop", "clown_face",
        "see_no_evil", "hear_no_evil", "speak_no_evil", "wave", "raised_hand", "ok_hand",
        "+1", "-1", "fist", "punch", "v", "crossed_fingers", "metal", "point_up_2",
        "point_down", "point_left", "point_right", "clap", "raised_hands", "pray",
        "muscle", "handshake", "eyes", "baby", "boy", "girl", "man", "woman",
        "older_man", "older_woman",
    ),
    "nature": (
        "dog", "cat", "mouse", "hamster", "rabbit", "fox_face", "bear", "panda_face",
        "koala", "tiger", "lion", "cow", "pig", "frog", "monkey_face", "chicken",
        "penguin", "bird", "baby_chick", "owl", "eagle", "duck", "wolf", "horse",
        "unicorn", "bee", "bug", "butterfly", "snail", "turtle", "snake", "octopus",
        "tropical_fish", "fish", "dolphin", "whale", "shark", "crocodile", "elephant",
        "cactus", "christmas_tree", "evergreen_tree", "deciduous_tree", "palm_tree",
        "seedling", "herb", "four_leaf_clover", "maple_leaf", "fallen_leaf", "mushroom",
        "tulip", "rose", "sunflower", "cherry_blossom", "sun_with_face", "full_moon",
        "crescent_moon", "star", "sparkles", "zap", "fire", "rainbow", "sunny", "cloud",
        "snowflake", "droplet", "ocean",
    ),
    "food": (
        "apple", "green_apple", "pear", "tangerine", "lemon", "banana", "watermelon",
        "grapes", "strawberry", "melon", "cherries", "peach", "pineapple", "kiwi_fruit",
        "avocado", "tomato", "eggplant", "carrot", "corn", "hot_pepper", "cucumber",
        "potato", "bread", "croissant", "cheese", "egg", "bacon", "pancakes",
        "hamburger", "fries", "pizza", "hotdog", "taco", "burrito", "spaghetti", "ramen",
        "sushi", "bento", "curry", "rice", "cake", "birthday", "cookie", "chocolate_bar",
        "candy", "lollipop", "doughnut", "icecream", "coffee", "tea", "beer", "beers",
        "wine_glass", "cocktail", "tropical_drink", "champagne",
    ),
    "activity": (
        "soccer", "basketball", "football", "baseball", "tennis", "volleyball",
        "rugby_football", "8ball", "ping_pong", "badminton", "golf",
        "fishing_pole_and_fish", "running_shirt_with_sash", "ski", "snowboarder",
        "surfer", "swimmer", "bicyclist", "trophy", "medal_sports", "performing_arts",
        "art", "clapper", "microphone", "headphones", "musical_score",
        "musical_keyboard", "saxophone", "trumpet", "guitar", "violin", "game_die",
        "dart", "bowling", "video_game",
    ),
    "travel": (
        "car", "taxi", "blue_car", "bus", "trolleybus", "racing_car", "police_car",
        "ambulance", "fire_engine", "truck", "tractor", "bike", "airplane", "rocket",
        "helicopter", "boat", "speedboat", "ship", "anchor", "train", "bullettrain_side",
        "station", "fuelpump", "rotating_light", "vertical_traffic_light", "construction",
        "world_map", "statue_of_liberty", "tokyo_tower", "european_castle", "stadium",
        "fountain", "tent", "mountain", "volcano", "desert_island", "beach_umbrella",
        "house", "office", "hospital", "bank", "hotel", "school", "church",
        "night_with_stars", "sunrise", "city_sunset",
    ),
    "objects": (
        "watch", "iphone", "computer", "keyboard", "desktop_computer", "printer",
        "camera", "video_camera", "tv", "radio", "hourglass", "alarm_clock", "battery",
        "electric_plug", "bulb", "flashlight", "candle", "moneybag", "dollar",
        "credit_card", "gem", "wrench", "hammer", "nut_and_bolt", "gear", "lock",
        "unlock", "key", "door", "bed", "gift", "balloon", "tada", "confetti_ball",
        "envelope", "email", "package", "pencil2", "memo", "book", "books", "bookmark",
        "link", "paperclip", "scissors", "pushpin", "calendar", "clipboard",
        "chart_with_upwards_trend", "mag", "bell", "telescope", "microscope", "pill",
        "syringe",
    ),
    "symbols": (
        "heart", "orange_heart", "yellow_heart", "green_heart", "blue_heart",
        "purple_heart", "black_heart", "broken_heart", "two_hearts", "sparkling_heart",
        "heartpulse", "heavy_check_mark", "white_check_mark", "x", "heavy_plus_sign",
        "heavy_minus_sign", "question", "exclamation", "bangbang", "interrobang",
        "warning", "no_entry", "100", "recycle", "infinity", "peace_symbol", "yin_yang",
        "atom_symbol", "radioactive", "arrow_up", "arrow_down", "arrow_left",
        "arrow_right", "arrows_counterclockwise", "repeat", "musical_note", "notes",
        "copyright", "registered", "tm", "red_circle", "large_blue_circle",
        "white_circle", "black_circle", "hash", "zero", "one", "two", "three", "new",
        "free", "ok", "sos", "cool", "up", "top", "soon", "back",
    ),
    "flags": (
        "checkered_flag", "triangular_flag_on_post", "crossed_flags", "black_flag",
        "white_flag", "rainbow_flag", "pirate_flag", "us", "gb", "canada", "fr", "de",
        "it", "es", "jp", "kr", "cn", "india", "brazil", "mexico", "ru", "australia",
        "netherlands", "sweden", "norway", "ukraine",
    ),
}

# Shown by the search bar when no query is typed and nothing has been used yet.
DEFAULT_EMOJIS: Tuple[str, ...] = ("clap", "+1", "heart_eyes", "grinning", "thinking_face", "smiley")

#
# End of emoji_categories.py
#######################################################################################################################
