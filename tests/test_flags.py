"""
Flags Register Unit Tests
=========================

Tests for FlagsRegister byte packing and the Flag bit masks.

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

import itertools

import pytest
from gbcore import Flag, FlagsRegister


# =============================================================================
# Packing
# =============================================================================

class TestFlagsPacking:
    """Test conversion between FlagsRegister and the F byte."""

    def test_new_flags_all_clear(self):
        """Fresh flags are all false and pack to zero."""
        f = FlagsRegister()
        assert f == FlagsRegister(False, False, False, False)
        assert f.to_byte() == 0x00

    def test_from_byte(self):
        """0b1010_0000 decodes to zero + half-carry."""
        f = FlagsRegister.from_byte(0b1010_0000)
        assert f == FlagsRegister(zero=True, subtract=False, half_carry=True, carry=False)

    def test_to_byte(self):
        """zero + half-carry packs to 0b1010_0000."""
        f = FlagsRegister(zero=True, half_carry=True)
        assert f.to_byte() == 0b1010_0000

    def test_bit_positions(self):
        """Each flag occupies its documented bit."""
        assert FlagsRegister(zero=True).to_byte() == 0x80
        assert FlagsRegister(subtract=True).to_byte() == 0x40
        assert FlagsRegister(half_carry=True).to_byte() == 0x20
        assert FlagsRegister(carry=True).to_byte() == 0x10

    def test_flag_masks_match_positions(self):
        """Flag enum masks agree with the packed layout."""
        assert Flag.Z == 0x80
        assert Flag.N == 0x40
        assert Flag.H == 0x20
        assert Flag.C == 0x10

    def test_int_conversion(self):
        """int() gives the packed byte."""
        f = FlagsRegister(zero=True, carry=True)
        assert int(f) == 0x90

    @pytest.mark.parametrize("bits", list(itertools.product([False, True], repeat=4)))
    def test_flags_survive_packing(self, bits):
        """Every flag combination survives to_byte/from_byte."""
        f = FlagsRegister(*bits)
        assert FlagsRegister.from_byte(f.to_byte()) == f

    def test_low_nibble_discarded(self):
        """For every byte, only the high nibble survives."""
        for value in range(0x100):
            assert FlagsRegister.from_byte(value).to_byte() == value & 0xF0

    def test_low_nibble_only_is_clear(self):
        """A byte with only low bits set decodes to no flags."""
        assert FlagsRegister.from_byte(0x0F) == FlagsRegister()


# =============================================================================
# Display
# =============================================================================

class TestFlagsDisplay:
    """Test string rendering used by traces."""

    def test_str_all_clear(self):
        assert str(FlagsRegister()) == "----"

    def test_str_mixed(self):
        """Set flags show their letter, clear flags show '-'."""
        assert str(FlagsRegister(zero=True, half_carry=True)) == "Z-H-"
        assert str(FlagsRegister(subtract=True, carry=True)) == "-N-C"
