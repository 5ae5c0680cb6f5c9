"""Engine — gates and executes the action catalog."""
