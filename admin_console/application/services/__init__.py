from .state_broadcaster import StateBroadcaster
from .resource_store import ResourceStore
from .contact_store import ContactStore
from .coupon_store import CouponStore
from .faq_store import FAQStore
from .review_store import ReviewStore
from .store_accessor import (
    provide_store,
    use_contacts,
    use_coupons,
    use_faqs,
    use_reviews,
    use_store,
)

__all__ = [
    "StateBroadcaster",
    "ResourceStore",
    "ContactStore",
    "CouponStore",
    "FAQStore",
    "ReviewStore",
    "provide_store",
    "use_contacts",
    "use_coupons",
    "use_faqs",
    "use_reviews",
    "use_store",
]
