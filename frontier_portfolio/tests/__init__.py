"""Unit tests for frontier_portfolio"""
