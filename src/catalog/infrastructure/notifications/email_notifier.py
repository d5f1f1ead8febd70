"""Observer that announces saved products as an email message.

No mail is actually sent: the message goes to the log.
"""

from __future__ import annotations

import logging

from catalog.domain.model.product import Product
from catalog.domain.observer import ProductObserver

logger = logging.getLogger(__name__)


class EmailNotifier(ProductObserver):

    def notify(self, product: Product) -> None:
        logger.info(
            "Email message: Product '%s' of type %s saved.",
            product.name,
            product.category.value,
        )
