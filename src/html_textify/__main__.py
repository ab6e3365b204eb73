from html_textify.cli.convert import main

main()
