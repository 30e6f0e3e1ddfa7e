from .record import RecordBase
from .contact import ContactMessage, ContactMessageUpdate
from .coupon import Coupon, CouponCreate, CouponUpdate
from .faq import FAQ, FAQCreate, FAQUpdate
from .review import MediaAttachment, Review, ReviewCreate, ReviewUpdate

__all__ = [
    "RecordBase",
    "ContactMessage",
    "ContactMessageUpdate",
    "Coupon",
    "CouponCreate",
    "CouponUpdate",
    "FAQ",
    "FAQCreate",
    "FAQUpdate",
    "MediaAttachment",
    "Review",
    "ReviewCreate",
    "ReviewUpdate",
]
