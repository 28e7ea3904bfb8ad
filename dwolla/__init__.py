from .client import DwollaClient
from .config import Config, settings
from .exceptions import DwollaError, InvalidTransaction, RequestException
from .factory import DwollaTransactionFactory, TransactionFactory
from .funding_source import FundingSource
from .transaction import Transaction
from .user import User

__version__ = '0.1.0'

__all__ = [
    'Config',
    'DwollaClient',
    'DwollaError',
    'DwollaTransactionFactory',
    'FundingSource',
    'InvalidTransaction',
    'RequestException',
    'Transaction',
    'TransactionFactory',
    'User',
    'settings',
]
