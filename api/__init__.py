"""HTTP API for the blackjack table."""
