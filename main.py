import marimo

__generated_with = "0.18.3"
app = marimo.App()


@app.cell
def _():
    import lfs_config as lc
    from IPython.lib.pretty import pprint
    return lc, pprint


@app.cell
def _(lc):
    cfg = lc.create_git_configuration(".")
    return (cfg,)


@app.cell
def _(cfg, pprint):
    pprint(cfg)
    return


@app.cell
def _(cfg):
    cfg.remote(), cfg.push_remote(), cfg.remotes()
    return


@app.cell
def _(cfg):
    cfg.current_committer(), cfg.current_author()
    return


@app.cell
def _(cfg):
    oct(cfg.repository_permissions())
    return


@app.cell
def _(cfg, pprint):
    pprint(cfg.extensions())
    pprint(cfg.fetch_prune_config())
    return


if __name__ == "__main__":
    app.run()
