import pytest

from makepw.strength import PasswordStrength


TIERS = list(PasswordStrength)


@pytest.mark.parametrize(['entropy', 'expected'], [
    (0.0, PasswordStrength.WEAK),
    (45.0, PasswordStrength.WEAK),
    (45.9, PasswordStrength.WEAK),
    (46.0, PasswordStrength.MODERATE),
    (60.99, PasswordStrength.MODERATE),
    (61.0, PasswordStrength.STRONG),
    (80.5, PasswordStrength.STRONG),
    (81.0, PasswordStrength.VERY_STRONG),
    (100.9, PasswordStrength.VERY_STRONG),
    (101.0, PasswordStrength.EXTREME),
    (500.0, PasswordStrength.EXTREME),
])
def test_from_entropy(entropy, expected):
    assert PasswordStrength.from_entropy(entropy) is expected

def test_from_entropy_monotone():
    tiers = [PasswordStrength.from_entropy(i / 4) for i in range(0, 800)]
    assert all(t1 <= t2 for (t1, t2) in zip(tiers, tiers[1:]))
    assert set(tiers) == set(TIERS)

def test_from_entropy_is_pure():
    for entropy in [12.3, 45.0, 77.7, 150.0]:
        tier = PasswordStrength.from_entropy(entropy)
        assert PasswordStrength.from_entropy(entropy) is tier
        assert tier.description == PasswordStrength.from_entropy(entropy).description

def test_min_entropy():
    assert [tier.min_entropy for tier in TIERS] == [30.0, 50.0, 70.0, 90.0, 120.0]

def test_scales_are_distinct():
    # requesting STRONG needs 70 bits, but 70 bits is reported as STRONG, and VERY_STRONG's floor of 90 reports as VERY_STRONG
    assert PasswordStrength.from_entropy(PasswordStrength.STRONG.min_entropy) is PasswordStrength.STRONG
    assert PasswordStrength.from_entropy(PasswordStrength.WEAK.min_entropy) is PasswordStrength.WEAK
    assert PasswordStrength.from_entropy(PasswordStrength.MODERATE.min_entropy) is PasswordStrength.MODERATE
    assert PasswordStrength.from_entropy(85.0) is PasswordStrength.VERY_STRONG
    assert 85.0 < PasswordStrength.VERY_STRONG.min_entropy

def test_descriptions():
    assert PasswordStrength.WEAK.description == 'Weak - easily crackable'
    assert PasswordStrength.MODERATE.description == 'Moderate - acceptable for non-critical accounts'
    assert PasswordStrength.STRONG.description == 'Strong - good for most purposes'
    assert PasswordStrength.VERY_STRONG.description == 'Very strong - suitable for sensitive accounts'
    assert PasswordStrength.EXTREME.description == 'Extremely strong - suitable for high-security applications'

def test_ordering():
    assert TIERS == sorted(TIERS)
    assert PasswordStrength.WEAK < PasswordStrength.EXTREME
    assert PasswordStrength.STRONG >= PasswordStrength.MODERATE
    assert max(TIERS) is PasswordStrength.EXTREME

@pytest.mark.parametrize('name', ['VeryStrong', 'verystrong', 'VERY_STRONG', 'very-strong', 'Very Strong'])
def test_from_name(name):
    assert PasswordStrength.from_name(name) is PasswordStrength.VERY_STRONG

def test_from_name_invalid():
    with pytest.raises(ValueError, match = 'invalid strength'):
        PasswordStrength.from_name('Mighty')

def test_title():
    assert [str(tier) for tier in TIERS] == ['Weak', 'Moderate', 'Strong', 'VeryStrong', 'Extreme']
