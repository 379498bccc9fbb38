import pytest

from backend.utils.cpf_utils import CPFUtils


@pytest.mark.parametrize("cpf", ["52998224725", "09702414458", "11144477735", "12345678909"])
def test_valid_cpfs(cpf):
    assert CPFUtils.is_valid_cpf(cpf) is True


def test_corrupted_last_digit_is_rejected():
    assert CPFUtils.is_valid_cpf("52998224725") is True
    assert CPFUtils.is_valid_cpf("52998224726") is False


def test_corrupted_first_check_digit_is_rejected():
    assert CPFUtils.is_valid_cpf("52998224735") is False


@pytest.mark.parametrize("digit", list("0123456789"))
def test_repeated_digits_are_rejected(digit):
    assert CPFUtils.is_valid_cpf(digit * 11) is False


@pytest.mark.parametrize("cpf", ["", "5299822472", "529982247250", "abc", "529.982.247-2"])
def test_wrong_length_is_rejected(cpf):
    assert CPFUtils.is_valid_cpf(cpf) is False


def test_formatting_is_stripped():
    assert CPFUtils.normalize_cpf("529.982.247-25") == "52998224725"
    assert CPFUtils.is_valid_cpf("529.982.247-25") == CPFUtils.is_valid_cpf("52998224725")
    assert CPFUtils.is_valid_cpf(" 529 982 247 25 ") is True


@pytest.mark.parametrize("cpf", ["５２９９８２２４７２５", "٥٢٩٩٨٢٢٤٧٢٥"])
def test_non_ascii_digits_are_not_digits(cpf):
    assert CPFUtils.normalize_cpf(cpf) == ""
    assert CPFUtils.is_valid_cpf(cpf) is False


def test_check_digit_ten_or_eleven_becomes_zero():
    # 11 - (12 % 11) == 10
    assert CPFUtils.check_digit("000000006") == 0
    assert CPFUtils.is_valid_cpf("00000000604") is True
    # 11 - (11 % 11) == 11
    assert CPFUtils.check_digit("000000031") == 0
    assert CPFUtils.is_valid_cpf("00000003107") is True


def test_check_digit_weights():
    assert CPFUtils.check_digit("529982247") == 2
    assert CPFUtils.check_digit("5299822472") == 5
