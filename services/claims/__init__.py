"""
Claims Service
==============

FastAPI application exposing the HEAT mint authorization core.
"""
