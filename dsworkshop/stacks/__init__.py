"""Array and linked stacks, freed-address records and decreasing-run extraction."""