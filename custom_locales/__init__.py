"""Custom locales package root.

Registers custom language codes with the host CMS language registry and gives
their locales readable names. All interactions with host internals are
mediated through `custom_locales.host` so the core stays independent of them.
"""

__all__ = [
]
