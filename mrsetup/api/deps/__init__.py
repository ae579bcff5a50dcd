"""Homebrew-managed dependencies: llama.cpp, Go, Docker CLI, Xcode CLT."""
