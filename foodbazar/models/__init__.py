from .entities import Customer, Product, Transaction, TransactionItem, PAYMENT_METHODS
from .storage import StorageEntry

__all__ = [
    'Customer', 'Product', 'Transaction', 'TransactionItem',
    'PAYMENT_METHODS',
    'StorageEntry',
]
