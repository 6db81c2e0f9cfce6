"""
Block explorer and token icon links for display.

These helpers return `None` rather than raising when a link cannot be built.
"""

import re

from ethunits import config
from ethunits.checksum_cache import get_checksum_address
from ethunits.exceptions import FormatError

# Identifiers may carry a `-<suffix>` (e.g. a replacement counter) that is not part of the hash
_IDENTIFIER_SUFFIX = re.compile(r"-.*")


def get_etherscan_root_url_for_chain(chain_id: int) -> str:
    explorer_settings = config.settings.explorer
    root_url = explorer_settings.root_urls.get(chain_id, explorer_settings.default_root_url)
    return str(root_url).rstrip("/")


def get_etherscan_link_from_tx_hash(tx_hash: str | None, chain_id: int) -> str | None:
    if not tx_hash:
        return None

    normalized_hash = _IDENTIFIER_SUFFIX.sub("", tx_hash)
    return f"{get_etherscan_root_url_for_chain(chain_id)}/tx/{normalized_hash}"


def get_etherscan_link_for_account(account: str | None, chain_id: int) -> str | None:
    if not account:
        return None

    normalized_account = _IDENTIFIER_SUFFIX.sub("", account)
    return f"{get_etherscan_root_url_for_chain(chain_id)}/address/{normalized_account}"


def get_url_for_fallback_token_icon(address: str) -> str | None:
    """
    Build the TrustWallet asset URL for a token icon. The asset repository is keyed by checksummed
    address, so an address that cannot be checksummed has no icon.
    """

    try:
        checksummed_address = get_checksum_address(address)
    except FormatError:
        return None

    return config.settings.explorer.token_icon_url_template.format(address=checksummed_address)
