from queens import main

main()
