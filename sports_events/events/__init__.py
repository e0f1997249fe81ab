"""Event rules: timestamp codec, validation, id allocation and response shaping."""
