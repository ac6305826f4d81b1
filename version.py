# This line is updated by the release script
version = "0.1.0"
