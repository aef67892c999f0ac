"""Decoding of transactions tagged by their ``type`` key."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Union

from .errors import UnexpectedValueError
from .models import _require
from .transaction_types import (
    AddGatewayV1,
    AssertLocationV1,
    AssertLocationV2,
    CoinbaseV1,
    ConsensusGroupFailureV1,
    ConsensusGroupV1,
    CreateHtlcV1,
    DcCoinbaseV1,
    GenGatewayV1,
    GenPriceOracleV1,
    OuiV1,
    PaymentV1,
    PaymentV2,
    PocReceiptsV1,
    PocRequestV1,
    PriceOracleV1,
    RedeemHtlcV1,
    RewardsV1,
    RewardsV2,
    RoutingV1,
    SecurityCoinbaseV1,
    SecurityExchangeV1,
    StakeValidatorV1,
    StateChannelCloseV1,
    StateChannelOpenV1,
    TokenBurnExchangeRateV1,
    TokenBurnV1,
    TransferHotspotV1,
    TransferValidatorStakeV1,
    UnstakeValidatorV1,
    UpdateGatewayOuiV1,
    ValidatorHeartbeatV1,
    VarsV1,
)


@dataclass(frozen=True)
class UnknownTransaction:
    """A transaction of a type this package does not decode."""

    kind: str


Transaction = Union[
    AddGatewayV1,
    AssertLocationV1,
    AssertLocationV2,
    CoinbaseV1,
    ConsensusGroupFailureV1,
    ConsensusGroupV1,
    CreateHtlcV1,
    DcCoinbaseV1,
    GenGatewayV1,
    GenPriceOracleV1,
    OuiV1,
    PaymentV1,
    PaymentV2,
    PocReceiptsV1,
    PocRequestV1,
    PriceOracleV1,
    RedeemHtlcV1,
    RewardsV1,
    RewardsV2,
    RoutingV1,
    SecurityCoinbaseV1,
    SecurityExchangeV1,
    StakeValidatorV1,
    StateChannelCloseV1,
    StateChannelOpenV1,
    TokenBurnExchangeRateV1,
    TokenBurnV1,
    TransferHotspotV1,
    TransferValidatorStakeV1,
    UnstakeValidatorV1,
    UpdateGatewayOuiV1,
    ValidatorHeartbeatV1,
    VarsV1,
    UnknownTransaction,
]

_TRANSACTION_TYPES: dict[str, type] = {
    "add_gateway_v1": AddGatewayV1,
    "assert_location_v1": AssertLocationV1,
    "assert_location_v2": AssertLocationV2,
    "coinbase_v1": CoinbaseV1,
    "consensus_group_failure_v1": ConsensusGroupFailureV1,
    "consensus_group_v1": ConsensusGroupV1,
    "create_htlc_v1": CreateHtlcV1,
    "dc_coinbase_v1": DcCoinbaseV1,
    "gen_gateway_v1": GenGatewayV1,
    "gen_price_oracle_v1": GenPriceOracleV1,
    "oui_v1": OuiV1,
    "payment_v1": PaymentV1,
    "payment_v2": PaymentV2,
    "poc_receipts_v1": PocReceiptsV1,
    "poc_request_v1": PocRequestV1,
    "price_oracle_v1": PriceOracleV1,
    "redeem_htlc_v1": RedeemHtlcV1,
    "rewards_v1": RewardsV1,
    "rewards_v2": RewardsV2,
    "routing_v1": RoutingV1,
    "security_coinbase_v1": SecurityCoinbaseV1,
    "security_exchange_v1": SecurityExchangeV1,
    "stake_validator_v1": StakeValidatorV1,
    "state_channel_close_v1": StateChannelCloseV1,
    "state_channel_open_v1": StateChannelOpenV1,
    "token_burn_exchange_rate_v1": TokenBurnExchangeRateV1,
    "token_burn_v1": TokenBurnV1,
    "transfer_hotspot_v1": TransferHotspotV1,
    "transfer_validator_stake_v1": TransferValidatorStakeV1,
    "unstake_validator_v1": UnstakeValidatorV1,
    "update_gateway_oui_v1": UpdateGatewayOuiV1,
    "validator_heartbeat_v1": ValidatorHeartbeatV1,
    "vars_v1": VarsV1,
}


def parse_transaction(data: Mapping) -> Transaction:
    """Decode a transaction; unsupported types become ``UnknownTransaction``."""
    tag = _require(data, "type")
    if not isinstance(tag, str):
        raise UnexpectedValueError(tag)
    kind = _TRANSACTION_TYPES.get(tag)
    if kind is None:
        return UnknownTransaction(tag)
    return kind.from_dict(data)