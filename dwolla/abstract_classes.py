from abc import ABC, abstractmethod


class AbstractUser(ABC):
    """
    Abstract class for account holders

    *** A user is either the authenticated principal (it carries an
    *** oauth token) or a lightweight reference to another account.
    *** Subclasses provide the account-level read operations and the
    *** two money-movement operations.

    """

    @classmethod
    @abstractmethod
    def me(cls, oauth_token, *args, **kwargs):
        pass

    @abstractmethod
    def fetch(self, *args, **kwargs):
        pass

    @abstractmethod
    def balance(self, *args, **kwargs):
        pass

    @abstractmethod
    def contacts(self, *args, **kwargs):
        pass

    @abstractmethod
    def funding_sources(self, *args, **kwargs):
        pass

    @abstractmethod
    def send_money_to(self, destination, amount, pin, destination_type, description, *args, **kwargs):
        pass

    @abstractmethod
    def request_money_from(self, source, amount, pin, source_type, description, *args, **kwargs):
        pass


class AbstractFundingSource(ABC):
    """
    Abstract class for funding sources

    *** Funding sources are read-only here, they can only be
    *** built from an API payload.

    """

    @classmethod
    @abstractmethod
    def from_json(cls, data):
        pass


class AbstractTransaction(ABC):
    """
    Abstract class for money-movement operations

    *** A transaction validates its arguments on construction and
    *** submits itself exactly once through execute.

    """

    @abstractmethod
    def payload(self):
        pass

    @abstractmethod
    def execute(self):
        pass
