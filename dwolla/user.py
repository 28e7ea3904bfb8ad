import logging
from decimal import Decimal
from urllib.parse import quote

from .abstract_classes import AbstractUser
from .client import DwollaClient
from .exceptions import DwollaError
from .factory import DwollaTransactionFactory
from .funding_source import FundingSource
from .transaction import REQUEST, SEND, account_type


logger = logging.getLogger(__name__)

error_logs_prefix = 'Dwolla client error in:'

PROFILE_FIELDS = (
    'id',
    'name',
    'oauth_token',
    'latitude',
    'longitude',
    'city',
    'state',
    'type',
    'image',
    'contact_type',
)


def _as_float(value):
    if value is None or value == '':
        return None
    return float(value)


class User(AbstractUser):
    """
    A Dwolla account.

    A user built with an oauth token is the authenticated principal and
    can read its own balance, contacts and funding sources and move
    money. Without a token it is only a reference to another account,
    usable as the counterparty of a transaction.

    Users are immutable; ``fetch`` returns a new instance.
    """

    def __init__(
        self,
        id: str = None,
        name: str = None,
        oauth_token: str = None,
        latitude: float = None,
        longitude: float = None,
        city: str = None,
        state: str = None,
        type: str = None,
        image: str = None,
        contact_type: str = None,
        client: DwollaClient = None,
        transaction_factory=None,
    ):
        object.__setattr__(self, 'id', id)
        object.__setattr__(self, 'name', name)
        object.__setattr__(self, 'oauth_token', oauth_token)
        object.__setattr__(self, 'latitude', latitude)
        object.__setattr__(self, 'longitude', longitude)
        object.__setattr__(self, 'city', city)
        object.__setattr__(self, 'state', state)
        object.__setattr__(self, 'type', type)
        object.__setattr__(self, 'image', image)
        object.__setattr__(self, 'contact_type', contact_type)
        client = client or DwollaClient()
        object.__setattr__(self, 'client', client)
        object.__setattr__(
            self,
            'transaction_factory',
            transaction_factory or DwollaTransactionFactory(client),
        )

    def __setattr__(self, name, value):
        raise AttributeError(f'{type(self).__name__} is immutable, cannot set {name!r}')

    def __delattr__(self, name):
        raise AttributeError(f'{type(self).__name__} is immutable, cannot delete {name!r}')

    @classmethod
    def me(cls, oauth_token: str, client: DwollaClient = None, transaction_factory=None):
        return cls(oauth_token=oauth_token, client=client, transaction_factory=transaction_factory)

    @classmethod
    def find(cls, user_id: str, client: DwollaClient = None):
        """Look up another account's public profile with the application credentials."""
        client = client or DwollaClient()
        if not client.config.has_application_credentials:
            raise DwollaError(
                f'{error_logs_prefix} {cls.find.__qualname__} '
                f'api_key and api_secret must be configured to look up users'
            )
        response = client.get(
            f'/users/{quote(str(user_id), safe="")}',
            params=[
                ('client_id', client.config.api_key),
                ('client_secret', client.config.api_secret),
            ],
        )
        return cls._from_profile(response, client=client)

    @classmethod
    def _from_profile(cls, data, oauth_token=None, client=None, transaction_factory=None):
        return cls(
            id=data.get('Id'),
            name=data.get('Name'),
            oauth_token=oauth_token,
            latitude=_as_float(data.get('Latitude')),
            longitude=_as_float(data.get('Longitude')),
            city=data.get('City'),
            state=data.get('State'),
            type=data.get('Type'),
            client=client,
            transaction_factory=transaction_factory,
        )

    @classmethod
    def _from_contact(cls, data, client=None):
        return cls(
            id=data.get('Id'),
            name=data.get('Name'),
            city=data.get('City'),
            state=data.get('State'),
            image=data.get('Image'),
            contact_type=data.get('Type'),
            client=client,
        )

    @property
    def is_principal(self):
        return self.oauth_token is not None

    def _require_token(self, operation):
        if not self.is_principal:
            raise DwollaError(
                f'{error_logs_prefix} {operation.__qualname__} '
                f'an oauth token is required'
            )

    def fetch(self):
        self._require_token(User.fetch)
        response = self.client.get('/users', oauth_token=self.oauth_token)
        return self._from_profile(
            response,
            oauth_token=self.oauth_token,
            client=self.client,
            transaction_factory=self.transaction_factory,
        )

    def balance(self) -> Decimal:
        self._require_token(User.balance)
        response = self.client.get('/balance', oauth_token=self.oauth_token)
        return Decimal(str(response))

    def funding_sources(self):
        self._require_token(User.funding_sources)
        response = self.client.get('/fundingsources', oauth_token=self.oauth_token)
        return [FundingSource.from_json(item) for item in response or []]

    def funding_source(self, source_id: str):
        self._require_token(User.funding_source)
        response = self.client.get(
            f'/fundingsources/{quote(source_id, safe="")}',
            oauth_token=self.oauth_token,
        )
        return FundingSource.from_json(response)

    def contacts(self, search: str = None, type: str = None, limit: int = None):
        self._require_token(User.contacts)
        response = self.client.get(
            '/contacts',
            oauth_token=self.oauth_token,
            params=[('search', search), ('type', type), ('limit', limit)],
        )
        return [self._from_contact(item, client=self.client) for item in response or []]

    def send_money_to(
        self,
        destination,
        amount,
        pin: str,
        destination_type: account_type,
        description: str,
        funds_source: str = None,
    ):
        transaction = self.transaction_factory.create_transaction(
            origin=self,
            destination=destination,
            destination_type=destination_type,
            description=description,
            amount=amount,
            type=SEND,
            pin=pin,
            funds_source=funds_source,
        )
        return transaction.execute()

    def request_money_from(
        self,
        source,
        amount,
        pin: str,
        source_type: account_type,
        description: str,
    ):
        transaction = self.transaction_factory.create_transaction(
            origin=self,
            source=source,
            source_type=source_type,
            description=description,
            amount=amount,
            type=REQUEST,
            pin=pin,
        )
        return transaction.execute()

    def __eq__(self, other):
        if not isinstance(other, User):
            return NotImplemented
        return all(getattr(self, field) == getattr(other, field) for field in PROFILE_FIELDS)

    def __hash__(self):
        return hash(tuple(getattr(self, field) for field in PROFILE_FIELDS))

    def __repr__(self):
        return f'User(id={self.id!r}, name={self.name!r})'
