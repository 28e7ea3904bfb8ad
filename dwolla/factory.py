from abc import ABC, abstractmethod

from .transaction import Transaction


class TransactionFactory(ABC):
    """
     *** This interface decides how a User turns its send/request calls
     *** into transaction objects. Tests and alternative transports plug
     *** in their own factory, the default one builds real Transactions.

    """
    @abstractmethod
    def create_transaction(self, **kwargs):
        pass


class DwollaTransactionFactory(TransactionFactory):
    def __init__(self, client=None):
        self.client = client

    def create_transaction(self, **kwargs):
        if self.client is not None:
            kwargs.setdefault('client', self.client)
        return Transaction(**kwargs)
