"""Static data tables — distro ids, package managers, browsers."""
