from src.processor.cli import main

main()
