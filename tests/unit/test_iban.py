import pickle
import re

import pytest
from iso3166 import countries_by_alpha2

from bankident import FormatErrorReason, Iban, IbanFormatError, bban
from bankident.iban import REGEX

VALID_IBANS = [
    "AD9179714843548170724658",
    "AE532299249995935421750",
    "AL36442788709271283994894168",
    "AT836670643070032585",
    "AZ73GIGY95609694664952978687",
    "BA590483797190961278",
    "BE83158799706920",
    "BG29EFYA04741506522965",
    "BH45BSND64749329633519",
    "BR2900994781520950149594104E9",
    "CH2669331784946419826",
    "CY75371695368399798483913159",
    "CZ9667197451460125048740",
    "DE09355072686373974067",
    "DK2017303660295651",
    "DO72758351294497410197174992",
    "EE803801541625441184",
    "ES2837832292261368335005",
    "FI6346426364591804",
    "FO5778020271560713",
    "FR2531682128768051490609537",
    "GB42RHBR54612317078692",
    "GE20NB4430283848566197",
    "GI44UQCR057428239600992",
    "GL0502210301477863",
    "GR7642039964850941669463374",
    "GT46866930583377769763582334",
    "HR7971488917057910183",
    "HU91584374853132521152169392",
    "IE27CTJG26368089744633",
    "IL862354629185675963157",
    "IS925454646268060577432601",
    "IT82K7579579031831283849724",
    "JO94CBJO0010000000000131000302",
    "KW23YOUF8981762754308793114869",
    "KZ830907614112967961",
    "LB52372840451692007088329912",
    "LI1935676368061346475",
    "LT192412904756279442",
    "LU951073196477746242",
    "LV88HAGO9615590045208",
    "MC3212096543766737867569392",
    "MD9881991481700015080266",
    "ME36752723963983139414",
    "MK31948483764450559",
    "MR5442207381102036325668909",
    "MT84AIWA00813109843252965695890",
    "MU65OSUR4348845783494200142ABC",
    "NL64VCYA2607250706",
    "NO2451742753161",
    "PK13LCJY3078553597017331",
    "PL64778828144458067930515057",
    "PS38LEKA813957891201287138525",
    "PT87847144161279936872891",
    "QA58DOHB00001234567890ABCDEFG",
    "RO17KRBO3212835705756123",
    "RS80246113647338221492",
    "SA0979413508515371577583",
    "SE0651297191201320278580",
    "SI75412441865827872",
    "SK7336568401664473733427",
    "SM67H0718392993037614346095",
    "TL380080012345678910157",
    "TN6199977105796904072050",
    "TR888859050625760496700846",
    "VG14NDUM4605555206975725",
]

FR_IBAN = "FR1420041010050500013M02606"


@pytest.mark.parametrize("value", VALID_IBANS)
def test_valid_ibans(value):
    assert Iban.is_valid(value)
    assert str(Iban(value)) == value


@pytest.mark.parametrize("value", VALID_IBANS)
def test_case_and_whitespace_insensitive(value):
    spaced = " ".join(value[i:i + 4] for i in range(0, len(value), 4))
    assert Iban.is_valid(value.lower())
    assert Iban(f"  {spaced.lower()} ") == Iban(value)


@pytest.mark.parametrize("value", VALID_IBANS)
def test_round_trip(value):
    iban = Iban(value)
    assert Iban(str(iban)) == iban
    assert Iban(iban.to_printable_string()) == iban


@pytest.mark.parametrize("value", VALID_IBANS)
def test_regex_accepts_valid_ibans(value):
    assert re.fullmatch(REGEX, value)


def test_french_iban():
    iban = Iban("fr1420041010050500013m02606")
    assert str(iban) == FR_IBAN
    assert iban.country_code == "FR"
    assert iban.check_digit == "14"
    assert iban.bban == "20041010050500013M02606"
    assert iban.bank_identifier == "20041"
    assert iban.branch_identifier == "01005"
    assert iban.account_number == "0500013M026"
    assert iban.national_check_digit == "06"
    assert iban.structure is bban.for_country("FR")


def test_optional_fields_are_none():
    iban = Iban("GB29NWBK60161331926819")
    assert iban.bank_identifier == "NWBK"
    assert iban.branch_identifier == "601613"
    assert iban.account_number == "31926819"
    assert iban.national_check_digit is None


def test_printable_string():
    assert Iban(FR_IBAN).to_printable_string() == "FR14 2004 1010 0505 0001 3M02 606"
    assert Iban("DE89370400440532013000").to_printable_string() == "DE89 3704 0044 0532 0130 00"


@pytest.mark.parametrize(
    "value, reason",
    [
        ("", FormatErrorReason.NOT_WELL_FORMED),
        ("FR", FormatErrorReason.NOT_WELL_FORMED),
        ("FR1X20041010050500013M02606", FormatErrorReason.NOT_WELL_FORMED),
        ("FR14-2004-1010-0505-0001-3M02-606", FormatErrorReason.NOT_WELL_FORMED),
        ("1R1420041010050500013M02606", FormatErrorReason.NOT_WELL_FORMED),
        ("ﬀ1420041010050500013M02606", FormatErrorReason.NOT_WELL_FORMED),
        ("ZZ1420041010050500013M02606", FormatErrorReason.UNKNOWN_COUNTRY),
        ("US64SVBKUS6S3300958879", FormatErrorReason.UNSUPPORTED_COUNTRY),
        ("GB72MIDLA0051539024150", FormatErrorReason.INVALID_STRUCTURE),
        ("FR142004101005050001M02606", FormatErrorReason.INVALID_STRUCTURE),
        ("FR1520041010050500013M02606", FormatErrorReason.INCORRECT_CHECK_DIGIT),
        ("FR0020041010050500013M02606", FormatErrorReason.INCORRECT_CHECK_DIGIT),
    ],
)
def test_invalid_ibans(value, reason):
    assert not Iban.is_valid(value)
    with pytest.raises(IbanFormatError) as exc_info:
        Iban(value)
    assert exc_info.value.reason is reason
    assert exc_info.value.input_string == value


def test_error_messages():
    with pytest.raises(IbanFormatError, match="format is not appropriate for an IBAN"):
        Iban("not an iban")
    with pytest.raises(IbanFormatError, match="ISO 3166-1-alpha-2 code"):
        Iban("ZZ1420041010050500013M02606")
    with pytest.raises(IbanFormatError, match="'US' country does not support IBAN"):
        Iban("US64SVBKUS6S3300958879")
    with pytest.raises(IbanFormatError, match="structure used in GB"):
        Iban("GB72MIDLA0051539024150")
    with pytest.raises(IbanFormatError, match="check digits are incorrect"):
        Iban("FR1520041010050500013M02606")


def test_format_error_is_value_error():
    with pytest.raises(ValueError):
        Iban("FR15")


def test_none():
    assert not Iban.is_valid(None)
    with pytest.raises(TypeError):
        Iban(None)


def test_non_string():
    assert not Iban.is_valid(1234)
    with pytest.raises(TypeError):
        Iban(1234)


@pytest.mark.parametrize(
    "country, value, expected",
    [
        ("FR", "20041010050500013M02606", FR_IBAN),
        ("fr", "2004 1010 0505 0001 3m02 606", FR_IBAN),
        (countries_by_alpha2["DE"], "370400440532013000", "DE89370400440532013000"),
        ("GB", "NWBK60161331926819", "GB29NWBK60161331926819"),
    ],
)
def test_from_parts(country, value, expected):
    iban = Iban.from_parts(country, value)
    assert str(iban) == expected
    assert iban == Iban(expected)


def test_from_parts_calculated_check_digit_validates():
    iban = Iban.from_parts("FR", "20041010050500013M02606")
    assert Iban.is_valid(str(iban))


def test_from_parts_subdivision_uses_parent_structure():
    iban = Iban.from_parts("GF", "20041010050500013M02606")
    assert iban.country_code == "GF"
    assert iban.structure is bban.for_country("FR")
    assert Iban.is_valid(str(iban))


@pytest.mark.parametrize(
    "country, value, reason",
    [
        ("ZZ", "20041010050500013M02606", FormatErrorReason.UNKNOWN_COUNTRY),
        ("US", "20041010050500013M02606", FormatErrorReason.UNSUPPORTED_COUNTRY),
        ("FR", "123", FormatErrorReason.INVALID_STRUCTURE),
        ("GB", "MIDLA0051539024150", FormatErrorReason.INVALID_STRUCTURE),
        ("FR", "2004101005050001ﬀ02606", FormatErrorReason.INVALID_STRUCTURE),
        ("ıt", "0542811101000000123456", FormatErrorReason.UNKNOWN_COUNTRY),
    ],
)
def test_from_parts_errors(country, value, reason):
    with pytest.raises(IbanFormatError) as exc_info:
        Iban.from_parts(country, value)
    assert exc_info.value.reason is reason


def test_from_parts_none():
    with pytest.raises(TypeError):
        Iban.from_parts(None, "20041010050500013M02606")
    with pytest.raises(TypeError):
        Iban.from_parts("FR", None)


def test_equality_and_hash():
    a = Iban(FR_IBAN)
    b = Iban(FR_IBAN.lower())
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1
    assert a != Iban("DE89370400440532013000")
    assert a != FR_IBAN


def test_ordering():
    ibans = [Iban("FR1420041010050500013M02606"), Iban("DE89370400440532013000"), Iban("AT836670643070032585")]
    assert [str(i) for i in sorted(ibans)] == [
        "AT836670643070032585",
        "DE89370400440532013000",
        "FR1420041010050500013M02606",
    ]


def test_immutable():
    iban = Iban(FR_IBAN)
    with pytest.raises(AttributeError):
        iban._value = "DE89370400440532013000"
    with pytest.raises(AttributeError):
        del iban._value


def test_pickle():
    iban = Iban(FR_IBAN)
    assert pickle.loads(pickle.dumps(iban)) == iban


def test_repr():
    assert repr(Iban(FR_IBAN)) == f"Iban('{FR_IBAN}')"
