"""
This allows the assistant to be run as a module with `python -m llm_assistant`.
"""
from .main import main

if __name__ == "__main__":
    main()
