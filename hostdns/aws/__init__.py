"""AWS implementations: Route 53 for DNS, EC2 IMDS for instance metadata."""
