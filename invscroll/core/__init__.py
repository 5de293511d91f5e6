"""Pure slot classification and lock bookkeeping."""
