"""Tests for naming convention detection."""

from weld_numbering import NamingConvention, PatternDetector, detect_dominant, detect_single


class TestDetectSingle:
    """Tests for detect_single()."""

    def test_prefixed_padded(self) -> None:
        """Test detecting FW-## from one weld number."""
        assert detect_single("FW-01") == NamingConvention("FW-", 2, True)

    def test_prefixed_three_digit_padding(self) -> None:
        """Test detecting W-### from one weld number."""
        assert detect_single("W-001") == NamingConvention("W-", 3, True)

    def test_numeric_only(self) -> None:
        """Test that a bare number has no prefix and no padding."""
        assert detect_single("42") == NamingConvention("", 0, False)

    def test_numeric_padded(self) -> None:
        """Test that a zero-led bare number fixes the padding width."""
        assert detect_single("007") == NamingConvention("", 3, False)

    def test_non_zero_leading_run_unpadded(self) -> None:
        """Test that a digit run not starting with 0 gives padding width 0."""
        assert detect_single("FW-100") == NamingConvention("FW-", 0, True)
        assert detect_single("5") == NamingConvention("", 0, False)

    def test_single_zero(self) -> None:
        """Test that a lone '0' counts as a one-digit padded run."""
        assert detect_single("0") == NamingConvention("", 1, False)

    def test_embedded_digits_belong_to_prefix(self) -> None:
        """Test that only the trailing digit run is numeric."""
        assert detect_single("P-101-W-5") == NamingConvention("P-101-W-", 0, True)

    def test_no_digits(self) -> None:
        """Test that weld numbers without digits are not detectable."""
        assert detect_single("ABC") is None
        assert detect_single("") is None

    def test_digits_not_trailing(self) -> None:
        """Test that digits must end the weld number."""
        assert detect_single("W-1A") is None

    def test_non_ascii_digits_ignored(self) -> None:
        """Test that non-ASCII digits don't form the numeric portion."""
        assert detect_single("W-١٢") is None


class TestDetectDominant:
    """Tests for detect_dominant()."""

    def test_uniform_fw_pattern(self) -> None:
        """Test detecting FW-## pattern with 2-digit padding."""
        assert detect_dominant(["FW-01", "FW-02", "FW-03"]) == NamingConvention("FW-", 2, True)

    def test_uniform_w_pattern(self) -> None:
        """Test detecting W-### pattern with 3-digit padding."""
        assert detect_dominant(["W-001", "W-002", "W-050"]) == NamingConvention("W-", 3, True)

    def test_numeric_only(self) -> None:
        """Test detecting numeric-only pattern."""
        assert detect_dominant(["1", "2", "3"]) == NamingConvention("", 0, False)

    def test_numeric_padded(self) -> None:
        """Test detecting numeric pattern with padding."""
        assert detect_dominant(["001", "002", "010"]) == NamingConvention("", 3, False)

    def test_majority_wins(self) -> None:
        """Test that the most common pattern wins when formats are mixed."""
        weld_ids = ["FW-01", "FW-02", "FW-03", "W-001", "W-002"]

        assert detect_dominant(weld_ids) == NamingConvention("FW-", 2, True)

    def test_majority_wins_regardless_of_position(self) -> None:
        """Test that a later majority beats an earlier minority."""
        weld_ids = ["W-001", "FW-01", "FW-02", "FW-03"]

        assert detect_dominant(weld_ids) == NamingConvention("FW-", 2, True)

    def test_tie_goes_to_first_seen(self) -> None:
        """Test that ties are broken by first appearance."""
        assert detect_dominant(["W-001", "FW-01"]) == NamingConvention("W-", 3, True)
        assert detect_dominant(["FW-01", "W-001"]) == NamingConvention("FW-", 2, True)

    def test_tie_goes_to_first_seen_not_first_to_reach_count(self) -> None:
        """Test that a group seen first keeps a tie even if another reaches the count earlier."""
        weld_ids = ["W-001", "FW-01", "FW-02", "W-002"]

        assert detect_dominant(weld_ids) == NamingConvention("W-", 3, True)

    def test_empty_returns_default(self) -> None:
        """Test default pattern for empty input."""
        assert detect_dominant([]) == NamingConvention("W-", 3, True)

    def test_all_undetectable_returns_default(self) -> None:
        """Test default pattern when no weld number has digits."""
        assert detect_dominant(["ABC", "", "TBD"]) == NamingConvention("W-", 3, True)

    def test_undetectable_ignored_in_vote(self) -> None:
        """Test that weld numbers without digits don't affect the vote."""
        assert detect_dominant(["TBD", "FW-01", "N/A"]) == NamingConvention("FW-", 2, True)

    def test_single_weld_id(self) -> None:
        """Test detecting from a single weld number."""
        assert detect_dominant(["FW-001"]) == NamingConvention("FW-", 3, True)

    def test_custom_fallback(self) -> None:
        """Test that the fallback convention replaces the default."""
        fallback = NamingConvention("FW-", 2, True)

        assert detect_dominant([], fallback=fallback) == fallback
        assert detect_dominant(["ABC"], fallback=fallback) == fallback

    def test_accepts_generator(self) -> None:
        """Test that any iterable of weld numbers is accepted."""
        weld_ids = (f"FW-{i:02d}" for i in range(1, 4))

        assert detect_dominant(weld_ids) == NamingConvention("FW-", 2, True)


class TestPatternDetector:
    """Tests for PatternDetector."""

    def test_default_fallback(self) -> None:
        """Test that the detector falls back to W-### by default."""
        detector = PatternDetector()

        assert detector.fallback == NamingConvention("W-", 3, True)
        assert detector.detect_dominant([]) == NamingConvention("W-", 3, True)

    def test_custom_fallback(self) -> None:
        """Test that the detector uses its configured fallback."""
        fallback = NamingConvention("", 0, False)
        detector = PatternDetector(fallback=fallback)

        assert detector.detect_dominant(["ABC"]) == fallback

    def test_detect_single(self) -> None:
        """Test single weld number detection through the detector."""
        detector = PatternDetector()

        assert detector.detect_single("FW-01") == NamingConvention("FW-", 2, True)
        assert detector.detect_single("ABC") is None

    def test_detect_dominant(self) -> None:
        """Test majority detection through the detector."""
        detector = PatternDetector()

        assert detector.detect_dominant(["1", "2", "W-001"]) == NamingConvention("", 0, False)
