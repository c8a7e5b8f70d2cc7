"""Generate C# POCO classes from SQL Server table schemas."""
