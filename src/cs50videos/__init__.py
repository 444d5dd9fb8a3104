"""cs50videos: latest CS50 uploads as a tool endpoint."""
