# -- TeapotMesh CLI Entry -- #

from TeapotMesh.runner import main

if __name__ == '__main__':
    main()
