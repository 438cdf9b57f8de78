from cpamm import constants as c
from cpamm.pubkey import Pubkey, b58encode, find_program_address, is_on_curve


def test_default_quote_mints_text():
    expected = [
        "So11111111111111111111111111111111111111112",
        "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v",
    ]
    assert [Pubkey.from_base58(text) for text in expected] == list(c.DEFAULT_QUOTE_MINTS)
    assert [b58encode(bytes(mint)) for mint in c.DEFAULT_QUOTE_MINTS] == expected


def test_program_ids_round_trip():
    assert str(c.PROGRAM_ID) == "cpamdpZCGKUy5JxQXB4dcpGPiikHawvSWAd6mEn1sGG"
    assert Pubkey.from_base58(str(c.LOCAL_PROGRAM_ID)) == c.LOCAL_PROGRAM_ID
    assert str(c.TREASURY_ID) == "BJQbRiRWhJCyTYZcAuAL3ngDCx3AyFQGKDq8zhiZAKUw"


def test_config_seed_derives_valid_address():
    address, bump = find_program_address(
        [c.CONFIG_PREFIX, (0).to_bytes(8, "little")], c.PROGRAM_ID
    )
    assert not is_on_curve(bytes(address))
    assert 0 < bump <= 255