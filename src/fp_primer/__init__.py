"""
fp_primer — worked examples of functional error handling with fpkit.

Small, independent walkthroughs: composing functions with pipe/flow,
optional values, and typed success/failure results applied to a checkout,
a user decoder, a login-name validator and a few others.

Run them with the `fp-primer` command; every labelled value is written to
the structured log.
"""

__version__ = "0.1.0"
