import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import Literal

from .abstract_classes import AbstractTransaction
from .client import DwollaClient
from .exceptions import InvalidTransaction, RequestException


logger = logging.getLogger(__name__)

error_logs_prefix = 'Dwolla client error in:'


transaction_type = Literal[
    'send',
    'request',
]

account_type = Literal[
    'dwolla',
    'email',
]

CENT = Decimal('0.01')

SEND = 'send'
REQUEST = 'request'

# values the API expects for destinationType / sourceType
API_ACCOUNT_TYPES = {
    'dwolla': 'Dwolla',
    'email': 'Email',
}


class Transaction(AbstractTransaction):
    """
    A single send or request operation, built and then executed once.

    A send moves money from ``origin`` to ``destination``; a request asks
    ``source`` for money on behalf of ``origin``. The counterparty is
    either a User or a raw Dwolla id or email address, as given by the
    matching ``*_type``.
    """

    def __init__(
        self,
        origin,
        amount,
        pin: str,
        type: transaction_type,
        description: str = None,
        destination=None,
        destination_type: account_type = None,
        source=None,
        source_type: account_type = None,
        funds_source: str = None,
        client: DwollaClient = None,
    ):
        if type not in (SEND, REQUEST):
            raise InvalidTransaction(
                f'{error_logs_prefix} {Transaction.__qualname__} '
                f'type must be one of {SEND!r} or {REQUEST!r}, got {type!r}'
            )
        if origin is None or not getattr(origin, 'oauth_token', None):
            raise InvalidTransaction(
                f'{error_logs_prefix} {Transaction.__qualname__} '
                f'origin must be an authenticated user'
            )

        if type == SEND:
            self._check_counterparty('destination', destination, destination_type, 'source', source)
            if source_type is not None:
                raise InvalidTransaction(
                    f'{error_logs_prefix} {Transaction.__qualname__} '
                    f'source_type cannot be set on a send'
                )
        else:
            self._check_counterparty('source', source, source_type, 'destination', destination)
            if destination_type is not None or funds_source is not None:
                raise InvalidTransaction(
                    f'{error_logs_prefix} {Transaction.__qualname__} '
                    f'destination_type and funds_source cannot be set on a request'
                )

        self.origin = origin
        self.amount = amount
        self.pin = pin
        self.type = type
        self.description = description
        self.destination = destination
        self.destination_type = destination_type
        self.source = source
        self.source_type = source_type
        self.funds_source = funds_source
        self.client = client or getattr(origin, 'client', None) or DwollaClient()

    @staticmethod
    def _check_counterparty(name, value, value_type, other_name, other_value):
        if value is None:
            raise InvalidTransaction(
                f'{error_logs_prefix} {Transaction.__qualname__} {name} is required'
            )
        if other_value is not None:
            raise InvalidTransaction(
                f'{error_logs_prefix} {Transaction.__qualname__} '
                f'{other_name} cannot be combined with {name}'
            )
        if value_type not in API_ACCOUNT_TYPES:
            raise InvalidTransaction(
                f'{error_logs_prefix} {Transaction.__qualname__} '
                f'{name}_type must be one of {sorted(API_ACCOUNT_TYPES)}, got {value_type!r}'
            )

    @property
    def path(self):
        return f'/transactions/{self.type}'

    @staticmethod
    def _account_id(account):
        return getattr(account, 'id', account)

    @staticmethod
    def _amount(amount):
        # the API takes a JSON number in dollars, rounded to the cent
        if isinstance(amount, Decimal):
            return float(amount.quantize(CENT, rounding=ROUND_HALF_UP))
        return amount

    def payload(self):
        payload = {
            "pin": self.pin,
            "amount": self._amount(self.amount),
            "notes": self.description,
        }
        if self.type == SEND:
            payload["destinationId"] = self._account_id(self.destination)
            payload["destinationType"] = API_ACCOUNT_TYPES[self.destination_type]
            if self.funds_source is not None:
                payload["fundsSource"] = self._account_id(self.funds_source)
        else:
            payload["sourceId"] = self._account_id(self.source)
            payload["sourceType"] = API_ACCOUNT_TYPES[self.source_type]
        return payload

    def execute(self) -> int:
        logger.info('Executing %s transaction for %s', self.type, self.amount)
        transaction_id = self.client.post(
            self.path,
            self.payload(),
            oauth_token=self.origin.oauth_token,
        )
        if transaction_id is None:
            logger.warning(
                f'{error_logs_prefix} {self.execute.__qualname__} '
                f'{self.path}: no transaction id in response'
            )
            raise RequestException(
                'The API did not return a transaction id.',
                response={"Success": True, "Response": transaction_id},
            )
        return int(transaction_id)

    def __repr__(self):
        counterparty = self.destination if self.type == SEND else self.source
        return f'Transaction(type={self.type!r}, amount={self.amount!r}, counterparty={counterparty!r})'
