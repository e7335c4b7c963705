"""Policy underwriting: eligibility, pricing and submission rules for insurance applications."""
