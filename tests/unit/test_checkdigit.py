import string

import pytest

from bankident.checkdigit import IBAN_CHECK_DIGIT, IbanCheckDigit

VALID = [
    "AL42500951008263YMBNVJQPG592",
    "AD8068037409EYVLENCKM36B",
    "AT569679968878262587",
    "AZ41WCPC09WWE5Z357DC0H5M4V5O",
    "BH09BKGN31K7RRNKX6BX3Y",
    "BE11247435144852",
    "BA801060410664917763",
    "BR0544704519170100945405853ZK",
    "BG93OSML036868ABACW4OH",
    "CR1907973232651627907",
    "HR6126088131592490560",
    "CY9048920754P2G9RW3NVXCYT0Y0",
    "CZ5265310894121818381756",
    "DK0497590130583029",
    "DO12PWTC90284552983454956794",
    "EE627838993129304903",
    "FO1218128341341002",
    "FI9774860592510001",
    "FR839677472939PWV9Q74UHN824",
    "GE21OG6039692068085278",
    "DE18291071157514699238",
    "GI88MPPQMLHLXO1G2SRKE1L",
    "GR729341723RLAJNJ10WHEV5PCX",
    "GL1126041283912497",
    "GT72BP80YABMXGRD87KIDELRA4AJ",
    "HU92752873580649542475542408",
    "IS400736102173233535735816",
    "IE46KJLI82294657142673",
    "IL410929888876852849226",
    "IT81S4590379871K0AB4ZQT759R",
    "KZ04608LYDWRN9S1G4N6",
    "KW88VJRPQK04EN0VO7RNU8TJ1WAQ20",
    "LV87IZCRRDNM0TLK00DIJ",
    "LB910252NQPX7CXAIXRQG07J3M1A",
    "LI5737273EEWY16981U6R",
    "LT807046238142274725",
    "LU92632WB10W8CFS57D4",
    "MK25949DMJOPQACDU01",
    "MT10PJRS51597PX93G10K7PYT9CN2IG",
    "MR0775732988241953156481703",
    "MU38YMWQ6747283246010491292RXS",
    "MD026JK24D0RFGDJJPJQHKWN",
    "MC4272385506432J7GHL5DQUF20",
    "ME44698013825239609380",
    "NL18VLPN6958795806",
    "NO7792337227957",
    "PK12FXQFCLUC4U0D7Y649U1L",
    "PL10062120807058963164431234",
    "PS11KEAZTZGUUZTQ3F9OTMVIGILIX",
    "PT31834209000552381227836",
    "RO74JVFO6B4T5J79UJ2SX385",
    "SM74J0860464071EFIDJ0OTELUJ",
    "SA6034GYETER2Q3T4BC3ZXML",
    "RS25224008962961371620",
    "SK4988315651646165399678",
    "SI16831821650532179",
    "ES7804816688444683784937",
    "SE3367488724350721084494",
    "CH48837522XQSTYGPFKBT",
    "TN3214154456081981538080",
    "TR2439111QRT60VYQ0ZPQFTB4F",
    "AE297997987743698771526",
    "GB40CUFM27126929790073",
    "VG88DQDO8896564297833915",
    "YY62DRWQ354548673SC833V5AMLYPNNR78",
    "ZZ70JJXD3109729650459XALAO5L68UDTR1",
]

INVALID = [
    "FR45123",
    "MD006JK24D0RFGDJJPJQHKWN",
    "MD016JK24D0RFGDJJPJQHKWN",
    "MD996JK24D0RFGDJJPJQHKWN",
    "BY00NBRB3600000000000Z00AB00",
]


@pytest.mark.parametrize("value", VALID)
def test_validate(value):
    assert IBAN_CHECK_DIGIT.validate(value)


@pytest.mark.parametrize("value", VALID)
def test_calculate(value):
    assert IBAN_CHECK_DIGIT.calculate(value[:2] + "00" + value[4:]) == value[2:4]


@pytest.mark.parametrize("value", VALID[:5])
def test_calculate_ignores_current_check_digits(value):
    assert IBAN_CHECK_DIGIT.calculate(value[:2] + "42" + value[4:]) == value[2:4]


@pytest.mark.parametrize("value", VALID[:5])
def test_lower_case_is_accepted(value):
    assert IBAN_CHECK_DIGIT.validate(value.lower())


@pytest.mark.parametrize("value", INVALID)
def test_validate_invalid(value):
    assert not IBAN_CHECK_DIGIT.validate(value)


def test_calculate_then_validate():
    bban = "20041010050500013M02606"
    check_digit = IBAN_CHECK_DIGIT.calculate("FR00" + bban)
    assert check_digit == "14"
    assert IBAN_CHECK_DIGIT.validate("FR" + check_digit + bban)


@pytest.mark.parametrize("reserved", ["00", "01", "99"])
def test_reserved_check_digits_are_never_valid(reserved):
    for value in VALID[:10]:
        assert not IBAN_CHECK_DIGIT.validate(value[:2] + reserved + value[4:])


@pytest.mark.parametrize("value", [None, 12345, "", "FR1", "FR12", "FR14 2004", "FR14-20041"])
def test_validate_never_raises(value):
    assert IBAN_CHECK_DIGIT.validate(value) is False


def test_calculate_rejects_short_values():
    with pytest.raises(ValueError):
        IBAN_CHECK_DIGIT.calculate("123")
    with pytest.raises(ValueError):
        IBAN_CHECK_DIGIT.calculate("FR00")


def test_calculate_rejects_non_alphanumerics():
    with pytest.raises(ValueError):
        IBAN_CHECK_DIGIT.calculate("FR00 1234")


def test_calculate_rejects_none():
    with pytest.raises(TypeError):
        IBAN_CHECK_DIGIT.calculate(None)


def test_calculate_is_two_digits():
    # 98 - 97 would be "1" without padding
    for value in VALID:
        assert len(IBAN_CHECK_DIGIT.calculate(value)) == 2


def test_instances_are_interchangeable():
    assert IbanCheckDigit().validate(VALID[0]) == IBAN_CHECK_DIGIT.validate(VALID[0])


def test_single_substitution_detection():
    alphabet = string.digits + string.ascii_uppercase
    total = detected = 0
    for value in VALID[:-2]:
        for i in range(4, len(value)):
            for c in alphabet:
                if c == value[i]:
                    continue
                mutated = value[:i] + c + value[i + 1:]
                total += 1
                if not IBAN_CHECK_DIGIT.validate(mutated):
                    detected += 1
                elif value[i].isdigit() and c.isdigit():
                    pytest.fail(f"digit substitution undetected: {mutated}")
    assert detected / total >= 0.969
