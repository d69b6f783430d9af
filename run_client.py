#!/usr/bin/env python3
"""Run the Linear GraphQL client from a checkout."""

from linear_gql.cli import run


if __name__ == "__main__":
    run()
