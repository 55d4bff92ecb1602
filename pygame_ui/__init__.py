"""PyGame front end for the blackjack table."""
