"""Session simulation -- cave generation, navigation, combat and agents."""
