"""Gym attendance package.

Organized by feature modules (attendance, members, settings, users) with a thin
Flask controller layer on top of service/repository layers.
"""
