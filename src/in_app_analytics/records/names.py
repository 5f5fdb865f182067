"""Well-known event names and payload keys for commerce/engagement reports."""

from __future__ import annotations


class Events:
    """Names of the standard engagement and commerce events."""

    ADD_PAYMENT_INFO = "add_payment_info"
    ADD_SHIPPING_INFO = "add_shipping_info"
    ADD_TO_CART = "add_to_cart"
    ADD_TO_WISHLIST = "add_to_wishlist"
    APP_OPEN = "app_open"
    BEGIN_CHECKOUT = "begin_checkout"
    CAMPAIGN_DETAILS = "campaign_details"
    EARN_VIRTUAL_CURRENCY = "earn_virtual_currency"
    GENERATE_LEAD = "generate_lead"
    JOIN_GROUP = "join_group"
    LOGIN = "login"
    LEVEL_END = "level_end"
    LEVEL_START = "level_start"
    LEVEL_UP = "level_up"
    POST_SCORE = "post_score"
    PURCHASE = "purchase"
    REFUND = "refund"
    REMOVE_FROM_CART = "remove_from_cart"
    SCREEN_VIEW = "screen_view"
    SEARCH = "search"
    SELECT_CONTENT = "select_content"
    SELECT_ITEM = "select_item"
    SELECT_PROMOTION = "select_promotion"
    SHARE = "share"
    SIGN_UP = "sign_up"
    SPEND_VIRTUAL_CURRENCY = "spend_virtual_currency"
    TUTORIAL_BEGIN = "tutorial_begin"
    TUTORIAL_COMPLETE = "tutorial_complete"
    UNLOCK_ACHIEVEMENT = "unlock_achievement"
    VIEW_CART = "view_cart"
    VIEW_ITEM = "view_item"
    VIEW_ITEM_LIST = "view_item_list"
    VIEW_PROMOTION = "view_promotion"
    VIEW_SEARCH_RESULTS = "view_search_results"


class EventFields:
    """Payload keys used with :class:`Events`."""

    PARAMETERS = "parameters"
    VALUE = "value"
    CURRENCY = "currency"
    COUPON = "coupon"
    ITEMS = "items"
    ITEM_ID = "item_id"
    ITEM_NAME = "item_name"
    ITEM_LIST_ID = "item_list_id"
    ITEM_LIST_NAME = "item_list_name"
    ITEM_CATEGORY = "item_category"
    PROMOTION_ID = "promotion_id"
    PROMOTION_NAME = "promotion_name"
    SHIPPING_TIER = "shipping_tier"
    PAYMENT_TYPE = "payment_type"
    SOURCE = "source"
    MEDIUM = "medium"
    CAMPAIGN = "campaign"
    TAX = "tax"
    SHIPPING = "shipping"
    TRANSACTION_ID = "transaction_id"
    AFFILIATION = "affiliation"
    SEARCH_TERM = "search_term"
    CONTENT_TYPE = "content_type"
    METHOD = "method"
    SIGN_UP_METHOD = "sign_up_method"
    LOGIN_METHOD = "login_method"
    ID = "id"
    LEVEL = "level"
    LEVEL_NAME = "level_name"
    SUCCESS = "success"
    CHARACTER = "character"
    SCORE = "score"
    GROUP_ID = "group_id"
    ITEM_LIST = "item_list"
    VIRTUAL_CURRENCY_NAME = "virtual_currency_name"
    SCREEN_NAME = "screen_name"
    SCREEN_CLASS = "screen_class"


__all__ = ["EventFields", "Events"]
