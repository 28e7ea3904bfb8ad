from .abstract_classes import AbstractFundingSource


def _as_bool(value):
    # the API sends Verified as "true"/"false" on some endpoints
    if isinstance(value, str):
        return value.strip().lower() == 'true'
    return bool(value)


class FundingSource(AbstractFundingSource):
    """A bank account or other instrument linked to a Dwolla account."""

    def __init__(self, id: str, name: str = None, type: str = None, verified: bool = False):
        self._id = id
        self._name = name
        self._type = type
        self._verified = verified

    @classmethod
    def from_json(cls, data):
        return cls(
            id=data.get('Id'),
            name=data.get('Name'),
            type=data.get('Type'),
            verified=_as_bool(data.get('Verified', False)),
        )

    @property
    def id(self):
        return self._id

    @property
    def name(self):
        return self._name

    @property
    def type(self):
        return self._type

    @property
    def verified(self):
        return self._verified

    def __eq__(self, other):
        if not isinstance(other, FundingSource):
            return NotImplemented
        return (self.id, self.name, self.type, self.verified) == \
            (other.id, other.name, other.type, other.verified)

    def __hash__(self):
        return hash((self.id, self.name, self.type, self.verified))

    def __repr__(self):
        return f'FundingSource(id={self.id!r}, name={self.name!r}, type={self.type!r}, verified={self.verified!r})'
