"""User-facing validation messages."""

AT_LEAST = "The value must be at least {ge}."
AT_MOST = "The value must be at most {le}."
GREATER_THAN = "The value must be greater than {other}."
LESS_THAN = "The value must be less than {other}."
LOAN_COUNT = "Exactly {count} loans are required for comparison."
ESCROW_BUDGET = "The ratio budget must exceed monthly taxes and insurance."
