"""
gui
~~~
All Qt widgets, pages and the controller.

•  No file or HTTP access here – bookmarks go through `metadata.core.repo`,
   requests through `metadata.api_clients`.
•  The controller module is Qt-free; import widgets from their own
   modules, e.g.

    from movieVault.gui.main_window import MainWindow
"""
