"""Sequential ephemeral media viewer ("Bites") service package."""
