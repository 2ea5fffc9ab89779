from dockviz.cli import main

main()
