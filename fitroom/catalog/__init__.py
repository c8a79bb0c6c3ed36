"""Static wardrobe catalog package."""

from fitroom.catalog.wardrobe import (
    DEFAULT_WARDROBE,
    WardrobeItem,
    fetch_wardrobe_image,
    get_wardrobe_item,
)
