"""Place for problem-specific checkers; it holds no modules yet."""