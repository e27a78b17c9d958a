"""Domain logic for the content-distribution project form."""
