"""Tests for graphql_server_helper"""
