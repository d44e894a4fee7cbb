"""Property models: the shared interface, ideal gases and incompressible liquids."""