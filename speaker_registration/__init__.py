"""Speaker registration: eligibility, session approval and fee calculation."""
