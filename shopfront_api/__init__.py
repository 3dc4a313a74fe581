"""
shopfront-api: users, addresses, coupons and newsletter signups over Postgres.
"""
