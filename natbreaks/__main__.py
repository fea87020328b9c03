from natbreaks.run import main

main()
