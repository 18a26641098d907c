# exit codes of the summary scripts
EXIT_SUCCESS = 0
EXIT_FILE_ERROR = 1
EXIT_PARSE_ERROR = 2
EXIT_EMPTY_RESULT = 3


class SummaryError(Exception):
    """Base class of every error that aborts a summary run."""
    exit_code = EXIT_PARSE_ERROR
    # pipeline stage reported on stderr
    stage = None


class ParseError(SummaryError, ValueError):
    """A captured field of a match is not a number."""
    stage = 'extract'

    def __init__(self, pattern_name, match_index, slot, text):
        super().__init__(
            'pattern {}: match #{} slot {} is not numeric: {!r}'.format(
                pattern_name, match_index, slot, text))
        self.pattern_name = pattern_name
        self.match_index = match_index
        self.slot = slot
        self.text = text


class DivisionByZeroError(SummaryError, ZeroDivisionError):
    """A ratio denominator is exactly zero."""
    stage = 'compute_ratios'

    def __init__(self, ratio_name, record_index):
        super().__init__(
            'ratio {}: denominator of record #{} is zero'.format(
                ratio_name, record_index))
        self.ratio_name = ratio_name
        self.record_index = record_index


class EmptyInputError(SummaryError, ValueError):
    """No match was found, so there is nothing to average."""
    exit_code = EXIT_EMPTY_RESULT
    stage = 'average_ratio'
