"""Video encoder listener: applies encoder results to video media status."""
