"""NIP implementations built on the models, core and utils layers.

Attributes:
    base: Shared Pydantic result models
        ([BaseLogs][roots.nips.base.BaseLogs]).
    nip01: Events, ids, signatures and filters (NIP-01).
"""
