from folds.general.functional.sequence import fold_left, fold_right
from folds.reverse import reverse_via_fold
from folds.captcha import circular_adjacent_sum, circular_offset_sum, halfway_sum
from folds.model import InvalidInput, validate_digits, parse_digits
