"""Well-known ICRC-1 ledger canister ids."""

from enum import Enum

from config.settings import Settings, settings
from src.ic_common.network import Network


class WellKnownToken(str, Enum):
    ICP = "ICP"
    CKBTC = "CKBTC"
    SNS1 = "SNS1"


MAINNET_LEDGERS: dict[WellKnownToken, str] = {
    WellKnownToken.ICP: "ryjl3-tyaaa-aaaaa-aaaba-cai",
    WellKnownToken.CKBTC: "mxzaz-hqaaa-aaaar-qaada-cai",
    WellKnownToken.SNS1: "zfcdd-tqaaa-aaaaq-aaaga-cai",
}


def well_known_ledgers(network: Network, cfg: Settings | None = None) -> dict[str, str]:
    """Token symbol → ledger canister id for ``network``.

    Local replicas only have what was deployed there; undeployed ledgers
    (empty env var) are left out.
    """
    if network is Network.IC:
        return {token.value: canister_id for token, canister_id in MAINNET_LEDGERS.items()}

    cfg = cfg or settings
    local = {
        WellKnownToken.ICP.value: cfg.LOCAL_ICP_CANISTER_ID,
        WellKnownToken.CKBTC.value: cfg.LOCAL_CKBTC_CANISTER_ID,
    }
    return {symbol: canister_id for symbol, canister_id in local.items() if canister_id}
