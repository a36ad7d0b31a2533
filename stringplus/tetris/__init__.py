"""Sub-package reserved for a brick-stacking game; it holds no modules."""