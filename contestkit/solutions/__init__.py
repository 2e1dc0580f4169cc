"""Reference solutions for contest problems, each reading standard input."""