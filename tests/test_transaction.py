import pytest

from heliumapi.errors import UnexpectedValueError
from heliumapi.transaction import UnknownTransaction, parse_transaction
from heliumapi.transaction_types import (
    AddGatewayV1,
    AssertLocationV1,
    AssertLocationV2,
    ConsensusGroupV1,
    NewXor,
    PaymentV1,
    PaymentV2,
    PocReceiptsV1,
    PocRequestV1,
    RewardsV2,
    RoutingV1,
    StateChannelCloseV1,
    TransferHotspotV1,
    UnstakeValidatorV1,
    VarsV1,
)
from heliumapi.values import Hnt


def _txn(kind, **fields):
    return {"type": kind, **fields}


def test_poc_request_v1():
    txn = parse_transaction(
        _txn(
            "poc_request_v1",
            hash="1gidN7e6OKn405Fru_0sGhsqca3lTsrfGKrM4dwM_E8",
            block_hash="RS2mBvd_4pbKCglkkyMroDQekPNO0xDdYx6Te3HGDGg",
            challenger="1examplechallenger",
            fee=0,
            onion_key_hash="onion",
            secret_hash="secret-hash",
            version=1,
        )
    )
    assert isinstance(txn, PocRequestV1)
    assert txn.block_hash == "RS2mBvd_4pbKCglkkyMroDQekPNO0xDdYx6Te3HGDGg"


def test_consensus_group_v1():
    txn = parse_transaction(
        _txn(
            "consensus_group_v1",
            delay=0,
            hash="yh01SJk8dvyqb-BGXxkHFUuLi6wF1pfL0VEFStJUt-E",
            height=5,
            members=["1examplemember"],
            proof="proof",
        )
    )
    assert isinstance(txn, ConsensusGroupV1)
    assert txn.hash == "yh01SJk8dvyqb-BGXxkHFUuLi6wF1pfL0VEFStJUt-E"


def test_payment_v2():
    txn = parse_transaction(
        _txn(
            "payment_v2",
            hash="C_jJZLKBOv_gRQ6P6wEpZPiRVAjf44FOx1iHOFD4haA",
            fee=35000,
            nonce=3,
            payer="1examplepayer",
            payments=[{"amount": 100, "memo": None, "payee": "1examplepayee"}],
        )
    )
    assert isinstance(txn, PaymentV2)
    assert len(txn.payments) == 1


def test_poc_receipts_v1():
    txn = parse_transaction(
        _txn(
            "poc_receipts_v1",
            hash="8RaF-G4pvMVuIXfBYhdqNuIlFSEHPm_rC8TH-h4JYdE",
            challenger="1examplechallenger",
            fee=0,
            onion_key_hash="onion",
            path=[],
            request_block_hash="block",
            secret="secret",
        )
    )
    assert isinstance(txn, PocReceiptsV1)
    assert txn.hash == "8RaF-G4pvMVuIXfBYhdqNuIlFSEHPm_rC8TH-h4JYdE"


def test_payment_v1():
    txn = parse_transaction(
        _txn(
            "payment_v1",
            hash="iMSckt_hUcMFY_d7W-QOupY0MGq_g3-CC2dq3P-HWIw",
            amount=100,
            fee=0,
            nonce=1,
            payer="1examplepayer",
            payee="1examplepayee",
        )
    )
    assert isinstance(txn, PaymentV1)
    assert txn.payee == "1examplepayee"


def test_rewards_v2():
    rewards = [
        {"account": "1exampleaccount", "amount": 1, "gateway": None, "type": "securities"}
        for _ in range(10138)
    ]
    txn = parse_transaction(
        _txn(
            "rewards_v2",
            hash="X0HNRGZ1HAX51CR8qS6LTopAosjFkuaaKXl850IpNDE",
            start_epoch=1,
            end_epoch=2,
            rewards=rewards,
        )
    )
    assert isinstance(txn, RewardsV2)
    assert len(txn.rewards) == 10138


def test_assert_location_v1():
    txn = parse_transaction(
        _txn(
            "assert_location_v1",
            hash="_I16bycHeltuOo7eyqa4uhv2Bc7awcztZflyvRkVZ24",
            fee=0,
            nonce=1,
            owner="1exampleowner",
            payer=None,
            gateway="1examplegateway",
            location="8c2836152804dff",
            staking_fee=100,
        )
    )
    assert isinstance(txn, AssertLocationV1)
    assert txn.hash == "_I16bycHeltuOo7eyqa4uhv2Bc7awcztZflyvRkVZ24"
    assert txn.payer is None


def test_assert_location_v2():
    txn = parse_transaction(
        _txn(
            "assert_location_v2",
            hash="TfjRv733Q9FBQ1_unw1c9g5ewVmMBuyf7APuyxKEqrw",
            fee=0,
            gain=12,
            nonce=2,
            owner="1exampleowner",
            payer="1examplepayer",
            gateway="1examplegatewayv2",
            location="8c2836152804dff",
            elevation=-3,
            staking_fee=100,
        )
    )
    assert isinstance(txn, AssertLocationV2)
    assert txn.gateway == "1examplegatewayv2"


@pytest.mark.parametrize("gateway", ["1examplegatewayone", "1examplegatewaytwo"])
def test_add_gateway_v1(gateway):
    txn = parse_transaction(
        _txn(
            "add_gateway_v1",
            hash="aoTggHSgaBAamuUUrXnY42jDZ5WUBxE0k-tshvfn35E",
            fee=0,
            owner="1exampleowner",
            payer="1examplepayer",
            gateway=gateway,
            staking_fee=4000000,
        )
    )
    assert isinstance(txn, AddGatewayV1)
    assert txn.gateway == gateway


def test_state_channel_close_v1():
    txn = parse_transaction(
        _txn(
            "state_channel_close_v1",
            height=861884,
            hash="vjtEQK0vn1w69fV3TMrlnN6L_qprsoWM_-7DVspmLL8",
            time=1,
            state_channel={
                "summaries": [],
                "state": "closed",
                "root_hash": "root",
                "owner": "1exampleowner",
                "nonce": 1,
                "id": "channel",
                "expire_at_block": 861900,
            },
            conflicts_with=None,
            closer="1examplecloser",
        )
    )
    assert isinstance(txn, StateChannelCloseV1)
    assert txn.height == 861884


def test_transfer_hotspot_v1():
    txn = parse_transaction(
        _txn(
            "transfer_hotspot_v1",
            hash="fSFua7A8G41K05QXAvJi5N2OB0QqmQ7xp7u-My4rYHc",
            fee=0,
            buyer="1examplebuyer",
            seller="1exampleseller",
            gateway="1examplegateway",
            buyer_nonce=1,
            amount_to_seller=0,
        )
    )
    assert isinstance(txn, TransferHotspotV1)
    assert txn.seller == "1exampleseller"


def test_routing_v1_new_xor():
    xor_filter = (
        "wVwCiewtCpELAAAAAAAAAAAAAAAAAAAAf2gAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAA"
        "AAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAA"
    )
    txn = parse_transaction(
        _txn(
            "routing_v1",
            fee=0,
            oui=12,
            hash="EjL6nBsSxovJluW-kdAaPcEiRt0OPIATOmlHD1Lth4Y",
            nonce=1,
            owner="1exampleowner",
            action={"action": "new_xor", "filter": xor_filter},
        )
    )
    assert isinstance(txn, RoutingV1)
    assert txn.oui == 12
    assert txn.owner == "1exampleowner"
    assert isinstance(txn.action, NewXor)
    assert txn.action.filter == xor_filter


def test_unstake_validator_v1():
    txn = parse_transaction(
        _txn(
            "unstake_validator_v1",
            address="1examplevalidator",
            owner="1exampleowner",
            owner_signature="signature",
            fee=35000,
            stake_amount=1000000000000,
            stake_release_height=10,
            hash="fMT-7_f2WQNKAYIQWX2-V258KsoI61HYbt_zAbN3A1I",
        )
    )
    assert isinstance(txn, UnstakeValidatorV1)
    assert txn.address == "1examplevalidator"
    assert txn.stake_amount == Hnt.from_units(1000000000000)
    assert txn.fee == 35000


def test_vars_v1():
    proof = (
        "MEUCIAXq0Pi0bK_DutFRF7R7ItEVrdUW2rmY8Guut5bHRboxAiEA9-wrvs7z9QZNRCC7"
        "XTKm4sb1cpXFD6TGB8Re8GfOyyA"
    )
    txn = parse_transaction(
        _txn(
            "vars_v1",
            hash="SB47bwBKP3ud1KdASYAndxkoIhZCXgPtusLUIsS7Q2o",
            vars={"sc_max_actors": 100},
            unsets=[],
            cancels=[],
            nonce=1,
            proof=proof,
            version_predicate=0,
            time=1,
            master_key=None,
            key_proof="",
            height=1,
        )
    )
    assert isinstance(txn, VarsV1)
    assert txn.proof == proof
    assert "sc_max_actors" in txn.vars


def test_unknown_type_is_kept_as_unknown():
    txn = parse_transaction({"type": "some_future_v9", "hash": "abc"})
    assert txn == UnknownTransaction("some_future_v9")


def test_missing_type_raises():
    with pytest.raises(UnexpectedValueError):
        parse_transaction({"hash": "abc"})


def test_non_string_type_raises():
    with pytest.raises(UnexpectedValueError):
        parse_transaction({"type": 3})


def test_known_type_with_missing_field_raises():
    with pytest.raises(UnexpectedValueError):
        parse_transaction({"type": "payment_v1", "hash": "abc"})