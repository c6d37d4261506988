"""Time entry engine package.

Computes statutory breaks, paid minutes and the additive night/Sunday/holiday
premium breakdown for a single shift, and runs per-employee record creation in
concurrent batches with retry. Organized by feature modules (breaks, premiums,
time_entries, batch, holidays) with a thin Flask controller layer on top.
"""
